import os
import tempfile
import unittest
import ctypes as ct

import vmtypes.utils.settings as settings
import vmtypes.utils.exceptions as exceptions
import vmtypes.utils.cout_utils as cout


class TestSettings(unittest.TestCase):
    """
    Tests the settings utilities module
    """

    def setUp(self):
        cout.cout_quiet()
        self.types_dict = {'integer_var': 'int',
                           'float_var': 'float',
                           'str_var': 'str',
                           'bool_var': 'bool'}
        self.default_dict = {'integer_var': 0,
                             'float_var': 0.0,
                             'str_var': 'default_string',
                             'bool_var': False}

    def test_settings_to_custom_types(self):
        in_dict = {'integer_var': '1234',
                   'float_var': '1.234',
                   'str_var': 'aaaa',
                   'bool_var': 'on'}

        settings.to_custom_types(in_dict, self.types_dict, self.default_dict)
        self.assertEqual(in_dict['integer_var'], 1234, 'Integer test for assigned values not passed')
        self.assertEqual(in_dict['float_var'], 1.234, 'Float test for assigned values not passed')
        self.assertEqual(in_dict['str_var'], 'aaaa', 'String test for assigned values not passed')
        self.assertIs(in_dict['bool_var'], True, 'Bool test for assigned values not passed')

        # default values
        in_default_dict = dict()
        settings.to_custom_types(in_default_dict, self.types_dict, self.default_dict)
        for k, v in self.default_dict.items():
            self.assertEqual(in_default_dict[k], v, 'Default value test for %s not passed' % k)

    def test_ctypes_output(self):
        in_dict = {'integer_var': '12', 'bool_var': 'off'}
        settings.to_custom_types(in_dict, self.types_dict, self.default_dict, no_ctype=False)
        self.assertIsInstance(in_dict['integer_var'], ct.c_int)
        self.assertEqual(in_dict['integer_var'].value, 12)
        self.assertEqual(in_dict['bool_var'].value, False)
        self.assertEqual(in_dict['float_var'].value, 0.0)
        self.assertEqual(in_dict['str_var'], 'default_string')

    def test_no_default_value(self):
        for k in self.types_dict:
            temp_default_dict = self.default_dict.copy()
            temp_default_dict[k] = None
            with self.assertRaises(exceptions.NoDefaultValueException):
                settings.to_custom_types(dict(), self.types_dict, temp_default_dict)

    def test_invalid_values(self):
        with self.assertRaises(exceptions.NotValidSetting):
            settings.to_custom_types({'integer_var': 'abc'}, self.types_dict, self.default_dict)

        with self.assertRaises(exceptions.NotRecognisedSetting):
            settings.to_custom_types({'unknown_var': '1'}, self.types_dict, self.default_dict)

        with self.assertRaises(exceptions.NotValidSetting):
            settings.to_custom_types({'integer_var': '5'}, self.types_dict, self.default_dict,
                                     options={'integer_var': [1, 2, 3]})

        with self.assertRaises(TypeError):
            settings.to_custom_types(dict(), {'var': 'list(int)'}, {'var': [1]})

    def test_str2bool(self):
        for value in ['false', 'Off', '0', 'no', '', False, ct.c_bool(False)]:
            self.assertFalse(settings.str2bool(value), 'str2bool(%r) should be False' % (value,))
        for value in ['true', 'on', '1', 'yes', True, ct.c_bool(True)]:
            self.assertTrue(settings.str2bool(value), 'str2bool(%r) should be True' % (value,))

    def test_load_config_file(self):
        with tempfile.TemporaryDirectory() as folder:
            file_name = os.path.join(folder, 'case.vmopts')
            with open(file_name, 'w') as f:
                f.write('[VMopts]\n')
                f.write('m_star = 20\n')
                f.write('steady = off\n')
            config = settings.load_config_file(file_name)
            self.assertEqual(config['VMopts']['m_star'], '20')
            self.assertEqual(config['VMopts']['steady'], 'off')

    def test_settings_table(self):
        table = settings.SettingsTable().generate(self.types_dict, self.default_dict,
                                                  {'integer_var': 'An integer'})
        self.assertIn('``integer_var``', table)
        self.assertIn('An integer', table)
        self.assertIn('``default_string``', table)


if __name__ == '__main__':
    unittest.main()
