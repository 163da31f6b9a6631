import ctypes as ct

import vmtypes.utils.exceptions as exceptions
import vmtypes.utils.settings as settings_utils


uint_max = 2**(8*ct.sizeof(ct.c_uint)) - 1


def check_uint(name, value, lower=0):
    """Raises ``NotValidSetting`` unless ``lower <= value <= uint_max``, the range of ``ct.c_uint``."""
    if not lower <= value <= uint_max:
        raise exceptions.NotValidSetting(name, value, '[%u, %u]' % (lower, uint_max))


class VMopts(ct.Structure):
    """ctypes definition for VMopts class
        struct VMopts {
            bool ImageMethod;
            unsigned int Mstar;
            bool Steady;
            bool KJMeth;
            bool NewAIC;
            double DelTime;
            bool Rollup;
            unsigned int NumCores;
            unsigned int NumSurfaces;
        };

    Solver-wide options of the vortex lattice method. Once :meth:`lock` is called (records built by
    :meth:`from_settings` and :meth:`from_file` are already locked) the options cannot be modified.
    """
    _fields_ = [("ImageMethod", ct.c_bool),
                ("Mstar", ct.c_uint),
                ("Steady", ct.c_bool),
                ("KJMeth", ct.c_bool),
                ("NewAIC", ct.c_bool),
                ("DelTime", ct.c_double),
                ("Rollup", ct.c_bool),
                ("NumCores", ct.c_uint),
                ("NumSurfaces", ct.c_uint)]

    settings_types = dict()
    settings_default = dict()
    settings_description = dict()

    settings_types['image_method'] = 'bool'
    settings_default['image_method'] = False
    settings_description['image_method'] = 'Use the image method to model a ground or symmetry plane'

    settings_types['m_star'] = 'int'
    settings_default['m_star'] = 10
    settings_description['m_star'] = 'Number of streamwise wake panels'

    settings_types['steady'] = 'bool'
    settings_default['steady'] = True
    settings_description['steady'] = 'Steady solution if ``True``, unsteady otherwise'

    settings_types['kj_meth'] = 'bool'
    settings_default['kj_meth'] = False
    settings_description['kj_meth'] = 'Use the Kutta-Joukowski method for the circulation'

    settings_types['new_aic'] = 'bool'
    settings_default['new_aic'] = True
    settings_description['new_aic'] = 'Rebuild the aerodynamic influence coefficient matrix every time step'

    settings_types['dt'] = 'float'
    settings_default['dt'] = 0.1
    settings_description['dt'] = 'Time step'

    settings_types['rollup'] = 'bool'
    settings_default['rollup'] = False
    settings_description['rollup'] = 'Free wake rollup'

    settings_types['num_cores'] = 'int'
    settings_default['num_cores'] = 1
    settings_description['num_cores'] = 'Number of cores the solver can use. At least 1'

    settings_table = settings_utils.SettingsTable()
    __doc__ += settings_table.generate(settings_types, settings_default, settings_description)

    def __init__(self):
        ct.Structure.__init__(self)
        self.ImageMethod = ct.c_bool(False)
        self.Mstar = ct.c_uint(10)
        self.Steady = ct.c_bool(True)
        self.KJMeth = ct.c_bool(False)
        self.NewAIC = ct.c_bool(True)
        self.DelTime = ct.c_double(0.1)
        self.Rollup = ct.c_bool(False)
        self.NumCores = ct.c_uint(1)
        self.NumSurfaces = ct.c_uint(1)

    def __setattr__(self, name, value):
        if getattr(self, '_locked', False):
            raise exceptions.ReadOnlyOptions(name)
        super().__setattr__(name, value)

    def set_options(self, options, n_surfaces=1):
        """
        Copies the options from a processed settings dictionary.

        Args:
            options (dict): settings, with the keys of ``settings_types``
            n_surfaces (int): number of lattice surfaces
        """
        check_uint('num_cores', options['num_cores'], lower=1)
        check_uint('n_surfaces', n_surfaces)
        check_uint('m_star', options['m_star'])

        self.ImageMethod = ct.c_bool(options['image_method'])
        self.Mstar = ct.c_uint(options['m_star'])
        self.Steady = ct.c_bool(options['steady'])
        self.KJMeth = ct.c_bool(options['kj_meth'])
        self.NewAIC = ct.c_bool(options['new_aic'])
        self.DelTime = ct.c_double(options['dt'])
        self.Rollup = ct.c_bool(options['rollup'])
        self.NumCores = ct.c_uint(options['num_cores'])
        self.NumSurfaces = ct.c_uint(n_surfaces)

    def lock(self):
        super().__setattr__('_locked', True)
        return self

    @property
    def locked(self):
        return getattr(self, '_locked', False)

    def as_dict(self):
        return {name: getattr(self, name) for name, _ in self._fields_}

    @classmethod
    def from_settings(cls, options, n_surfaces=1):
        """
        Builds a locked :class:`VMopts` from a (possibly partial, possibly string valued) settings dictionary.

        Missing settings take the values in ``settings_default``. ``options`` is not modified.
        """
        processed = settings_utils.to_custom_types(dict(options), cls.settings_types, cls.settings_default)
        vmopts = cls()
        vmopts.set_options(processed, n_surfaces=n_surfaces)
        return vmopts.lock()

    @classmethod
    def from_file(cls, file_name, n_surfaces=1, section='VMopts'):
        """Builds a locked :class:`VMopts` from the ``[VMopts]`` section of a settings file."""
        config = settings_utils.load_config_file(file_name)
        try:
            options = config[section]
        except KeyError:
            options = dict()
        return cls.from_settings(options, n_surfaces=n_surfaces)

    def __repr__(self):
        return 'VMopts(' + ', '.join('%s=%s' % (k, v) for k, v in self.as_dict().items()) + ')'
