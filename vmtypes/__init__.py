from vmtypes.version import __version__
