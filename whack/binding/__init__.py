from .observable import Observable, ViewModel, PropertyChanged, bindable, property_changed_args

__all__ = ["Observable", "ViewModel", "PropertyChanged", "bindable", "property_changed_args"]
