import textwrap
import colorama
import os
import vmtypes.utils.vmtypesdir as vmtypesdir

cwd = os.getcwd()


class Writer(object):
    fore_colours = ['', colorama.Fore.BLUE, colorama.Fore.CYAN, colorama.Fore.YELLOW, colorama.Fore.RED]
    reset = colorama.Style.RESET_ALL

    output_columns = 80
    separator = '-'*output_columns

    wrapper = textwrap.TextWrapper(width=output_columns, break_long_words=False)

    def __init__(self):
        self.print_screen = False
        self.print_file = False
        self.file = None
        self.file_route = ''
        self.file_name = ''

    def initialise(self, print_screen, print_file, file_route=None, file_name=None):
        self.print_screen = print_screen
        self.print_file = print_file

        if self.print_file:
            self.file_route = file_route
            self.file_name = file_name
            if not os.path.exists(self.file_route):
                try:
                    os.makedirs(self.file_route)
                except FileExistsError:
                    pass

            self.file = open(self.file_route + '/' + self.file_name, 'w')

        self.print_welcome_message()

    def print_welcome_message(self):
        self.print_separator()
        self.__call__('vmtypes: vortex lattice surface containers')
        self.print_separator()
        self.__call__('Running from ' + cwd, 2)
        self.__call__('Package being run is in ' + vmtypesdir.VmtypesDir, 2)

    def cout_quiet(self):
        self.print_screen = False

    def cout_talk(self):
        self.print_screen = True

    def print_separator(self, level=0):
        self.__call__(self.separator, level)

    def _wrap_lines(self, in_line):
        lines = in_line.split("\n")
        out = []
        for line in lines:
            if len(line) > self.output_columns:
                line = '\n'.join(self.wrapper.wrap(line))
            out.append(line)
        return out

    def __call__(self, in_line, level=0):
        if level > 4:
            raise AttributeError('Output level cannot be > 4')
        if self.print_screen:
            for line in self._wrap_lines(in_line):
                print(self.fore_colours[level] + line + self.reset)
        if self.print_file and self.file is not None:
            self.file.write('\n'.join(self._wrap_lines(in_line)) + '\n')

    def close(self):
        if self.file is not None:
            if not self.file.closed:
                self.file.close()

    def __del__(self):
        self.close()


cout_wrap = Writer()


def start_writer():
    global cout_wrap
    cout_wrap = Writer()


def finish_writer():
    global cout_wrap
    if cout_wrap is not None:
        cout_wrap.close()


def cout_quiet():
    cout_wrap.cout_quiet()


def cout_talk():
    cout_wrap.cout_talk()
