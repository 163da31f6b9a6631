"""vmtypes Exception Classes
"""
import vmtypes.utils.cout_utils as cout


def output_message(message, color_id=3):
    if cout.cout_wrap is None:
        print(message)
    else:
        cout.cout_wrap.print_separator(color_id)
        cout.cout_wrap(message, color_id)
        cout.cout_wrap.print_separator(color_id)


class DefaultValueBaseException(Exception):
    def __init__(self, variable, value, message=''):
        super().__init__(message)
        self.variable = variable
        self.value = value


class NoDefaultValueException(DefaultValueBaseException):
    def __init__(self, variable, value=None, message=''):
        message = "The variable " + variable + " has no default value, please indicate one"
        super().__init__(variable, value, message=message)
        output_message(message)


class NotValidSetting(DefaultValueBaseException):
    """
    Raised when a user gives a setting an invalid value
    """

    def __init__(self, setting, variable, options, value=None, message=''):
        message = 'The setting %s with entry %s is not one of the valid options: %s' % (setting, variable, options)
        super().__init__(variable, value, message=message)
        output_message(message, color_id=4)


class NotRecognisedSetting(DefaultValueBaseException):
    """
    Raised when a setting is not recognised
    """
    def __init__(self, setting, value=None, message=''):
        message = 'Unrecognised setting {:s}. Please check input file and/or documentation'.format(setting)
        super().__init__(variable=setting, value=value, message=message)


class InvalidDimensions(ValueError):
    """
    Raised when a grid dimension, once the correction is applied, is negative, or when a
    dimension source has a surface without fields to read the size from.

    Attributes:
        i_surf (int): surface index that triggered the error (``None`` if not surface specific)
    """
    def __init__(self, message, i_surf=None):
        if i_surf is not None:
            message = 'Surface %u: %s' % (i_surf, message)
        super().__init__(message)
        self.i_surf = i_surf
        output_message(message, color_id=4)


class MisalignedSurfaces(InvalidDimensions):
    """
    Raised when a per-surface collection does not have one entry per surface of the grid
    it is checked against.
    """
    def __init__(self, n_surf_expected, n_surf_found):
        message = 'Expected %u surfaces, found %u' % (n_surf_expected, n_surf_found)
        super().__init__(message)
        self.n_surf_expected = n_surf_expected
        self.n_surf_found = n_surf_found


class ReadOnlyOptions(AttributeError):
    def __init__(self, field):
        super().__init__('VMopts is locked, the option %s cannot be modified' % field)
        self.field = field
