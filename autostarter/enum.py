# -*- coding: utf-8 -*-
"""Autostarter: Lightweight enumerations

Copyright (c) 2012 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

"""


class _EnumValueMeta(type):
    def __repr__(self):
        return self.__name__

    def __str__(self):
        return self.__name__.rsplit('.', 1)[-1]


class _EnumValue(metaclass=_EnumValueMeta):
    pass


class Enum(type):
    """Use this metaclass to define an enumeration.

    Example:

        >>> class LaunchState(metaclass=Enum):
        ...     Pending = "Waiting for its delay to elapse."
        ...     Launched = "The child process was created."
        ...
        >>> LaunchState.Pending
        LaunchState.Pending
        >>> str(LaunchState.Pending)
        'Pending'
        >>> LaunchState.Pending.__doc__
        'Waiting for its delay to elapse.'
        >>> LaunchState.Pending is LaunchState.Launched
        False

    Values are unique classes, so they compare by identity and can be used as dictionary keys. Iterating over the
    enumeration yields its values in definition order.

    """
    def __new__(mcs, name, bases, dict_):
        valueIDs = dict()
        values = list()

        # Create _EnumValue subclasses for each value in the Enum.
        for attr in list(dict_.keys()):
            if not attr.startswith('_'):
                # If two names share a value, they share the replacement too.
                if dict_[attr] in valueIDs:
                    dict_[attr] = valueIDs[dict_[attr]]

                else:
                    temp = _EnumValueMeta(attr, (_EnumValue, ), {'__doc__': dict_[attr]})
                    temp.__name__ = '{}.{}'.format(name, attr)
                    valueIDs[dict_[attr]] = temp
                    values.append(temp)

                    dict_[attr] = temp

        dict_['_values'] = tuple(values)

        return type.__new__(mcs, name, bases, dict_)

    def __iter__(cls):
        return iter(cls._values)

    def __len__(cls):
        return len(cls._values)

    def __contains__(cls, value):
        return value in cls._values
