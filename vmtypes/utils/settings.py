"""
Settings Utilities

Settings are given as dictionaries of (usually string) values, typically read from a
``configobj`` file, and processed against three dictionaries declared next to the consumer:
``settings_types``, ``settings_default`` and ``settings_description``.
"""
import ctypes as ct
import numpy as np
import vmtypes.utils.exceptions as exceptions
import vmtypes.utils.cout_utils as cout


def str2bool(string):
    false_list = ['false', 'off', '0', 'no']
    if isinstance(string, (bool, np.bool_)):
        return bool(string)
    if isinstance(string, ct.c_bool):
        return string.value

    if not string:
        return False
    elif str(string).lower() in false_list:
        return False
    else:
        return True


_py_types = {'int': int,
             'float': float,
             'bool': str2bool,
             'str': str}

_c_types = {'int': ct.c_int,
            'float': ct.c_double,
            'bool': ct.c_bool,
            'str': str}


def cast(k, v, pytype, ctype):
    if isinstance(v, (ct.c_int, ct.c_uint, ct.c_double, ct.c_bool)):
        v = v.value
    try:
        return ctype(pytype(v))
    except (TypeError, ValueError):
        raise exceptions.NotValidSetting(k, v, 'castable to ' + pytype.__name__)


def get_custom_type(dictionary, v, k, default, no_ctype=True):
    try:
        pytype = _py_types[v]
    except KeyError:
        raise TypeError('Variable %s has an unknown type (%s) that cannot be casted' % (k, v))
    ctype = pytype if (no_ctype or v == 'str') else _c_types[v]
    if ctype is str2bool:
        ctype = bool

    try:
        value = dictionary[k]
    except KeyError:
        if default.get(k, None) is None:
            raise exceptions.NoDefaultValueException(k)
        value = default[k]
        notify_default_value(k, value)

    dictionary[k] = cast(k, value, pytype, ctype)
    return dictionary[k]


def to_custom_types(dictionary, types, default, options=dict(), no_ctype=True):
    """
    Casts, in place, the entries of ``dictionary`` to the types given in ``types``, filling
    missing entries with the values in ``default``.

    Args:
        dictionary (dict): settings to process. Modified in place.
        types (dict): setting name to one of ``'int'``, ``'float'``, ``'bool'`` or ``'str'``
        default (dict): default values. A ``None`` default makes the setting compulsory.
        options (dict): allowed values for some of the settings (optional)
        no_ctype (bool): return plain Python values instead of ``ctypes`` ones

    Raises:
        exceptions.NoDefaultValueException: a compulsory setting is missing
        exceptions.NotValidSetting: a value cannot be cast or is not among its options
        exceptions.NotRecognisedSetting: the dictionary contains unknown settings
    """
    unrecognised_settings = [k for k in dictionary.keys() if k not in types]
    if unrecognised_settings:
        for setting in unrecognised_settings:
            cout.cout_wrap(str(exceptions.NotRecognisedSetting(setting)), 4)
        raise exceptions.NotRecognisedSetting(unrecognised_settings[0])

    for k, v in types.items():
        get_custom_type(dictionary, v, k, default, no_ctype)

    check_settings_in_options(dictionary, types, options)
    return dictionary


def check_settings_in_options(settings, settings_types, settings_options):
    """
    Checks that settings given a type ``str`` or ``int`` and allowable options are indeed valid.

    Raises:
        exception.NotValidSetting: if the setting is not allowed.
    """
    for k in settings_options:
        try:
            value = settings[k].value
        except AttributeError:
            value = settings[k]
        if settings_types[k] in ('int', 'str') and value not in settings_options[k]:
            raise exceptions.NotValidSetting(k, value, settings_options[k])


def load_config_file(file_name: str) -> dict:
    """Reads a settings file.

    Args:
        file_name (str): path and file name of the file to be read by ``configobj``

    Returns:
        config (dict): a ``ConfigObj`` object that behaves like a dictionary
    """
    import configobj
    dict_config = configobj.ConfigObj(file_name)
    return dict_config


def notify_default_value(k, v):
    cout.cout_wrap('Variable ' + k + ' has no assigned value in the settings file.')
    cout.cout_wrap('    will default to the value: ' + str(v), 1)


class SettingsTable:
    """
    Generates the documentation's setting table at runtime.

    The settings of a configurable class are documented by a reStructuredText table appended to the
    class docstring:

    .. code-block:: python

        settings_table = settings.SettingsTable()
        __doc__ += settings_table.generate(settings_types, settings_default, settings_description)

    """
    titles = ['Name', 'Type', 'Description', 'Default']

    def __init__(self):
        self.field_length = [0] * len(self.titles)
        self.line_format = ''

    def generate(self, settings_types, settings_default, settings_description, header_line=None):
        """
        Returns a rst-format table with the settings' names, types, description and default values

        Args:
            settings_types (dict): Setting types.
            settings_default (dict): Settings default value.
            settings_description (dict): Setting description.
            header_line (str): Header line description (optional)

        Returns:
            str: .rst formatted string with a table containing the settings' information.
        """
        if header_line is None:
            header_line = 'The settings are given by a dictionary, with the following key-value pairs:'

        rows = []
        for setting, stype in settings_types.items():
            rows.append(['``' + setting + '``',
                         '``' + str(stype) + '``',
                         settings_description.get(setting, ''),
                         '``' + str(settings_default.get(setting, '')) + '``'])

        for i_field in range(len(self.titles)):
            lengths = [len(row[i_field]) for row in rows] + [len(self.titles[i_field])]
            self.field_length[i_field] = max(lengths) + 2

        self.line_format = ''.join('{0[' + str(i) + ']:<' + str(length) + '}'
                                   for i, length in enumerate(self.field_length))

        divider = ''.join('=' * (length - 2) + '  ' for length in self.field_length) + '\n'
        table_string = '\n    ' + header_line + '\n'
        table_string += '\n    ' + divider
        table_string += '    ' + self.line_format.format(self.titles) + '\n'
        table_string += '    ' + divider
        for row in rows:
            table_string += '    ' + self.line_format.format(row) + '\n'
        table_string += '    ' + divider
        return table_string
