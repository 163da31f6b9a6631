import os
import tempfile
import unittest

import vmtypes.utils.cout_utils as cout


class TestWriter(unittest.TestCase):

    def test_file_output(self):
        with tempfile.TemporaryDirectory() as folder:
            route = os.path.join(folder, 'log')
            writer = cout.Writer()
            writer.initialise(False, True, file_route=route, file_name='vmtypes.txt')
            writer('Allocated 2 matrices', 1)
            writer('surface ' * 30)
            writer.close()

            with open(os.path.join(route, 'vmtypes.txt')) as f:
                lines = f.read().split('\n')
            self.assertIn('Allocated 2 matrices', lines)
            wrapped = [line for line in lines if line.startswith('surface')]
            self.assertGreater(len(wrapped), 1)
            self.assertTrue(all(len(line) <= cout.Writer.output_columns for line in wrapped))

    def test_levels(self):
        writer = cout.Writer()
        writer.cout_quiet()
        with self.assertRaises(AttributeError):
            writer('message', 5)

    def test_restart_writer(self):
        cout.start_writer()
        cout.cout_quiet()
        self.assertFalse(cout.cout_wrap.print_screen)
        cout.finish_writer()


if __name__ == '__main__':
    unittest.main()
