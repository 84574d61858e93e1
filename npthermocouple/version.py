__version_info__ = (0, 1, 0)
__version__ = '.'.join('%d' % d for d in __version_info__)
