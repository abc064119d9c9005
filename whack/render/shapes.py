import pygame
from typing import Tuple


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24):
    font = pygame.font.SysFont(None, size)
    surface.blit(font.render(text, True, color), pos)


def draw_button(surface: pygame.Surface, rect: pygame.Rect, label: str = "",
                fill=(70, 70, 70), text_color=(20, 20, 20), size=24):
    pygame.draw.rect(surface, fill, rect, border_radius=4)
    pygame.draw.rect(surface, (235, 235, 235), rect, width=1, border_radius=4)
    if label:
        font = pygame.font.SysFont(None, size)
        img = font.render(label, True, text_color)
        surface.blit(img, img.get_rect(center=rect.center))
