"""Layout record classes filled in by a record builder from lexer tokens."""

from .printer import RecordPrinter

_printer = RecordPrinter()


class Record:
    """Base class for all layout records."""
    __slots__ = ()

    def render(self):
        """Return the banner-framed diagnostic dump of this record."""
        return _printer.emit(self)

    def __repr__(self):
        fields = ', '.join(
            f"{slot}={getattr(self, slot)!r}" for slot in self.__slots__)
        return f"{type(self).__name__}({fields})"


class Cell(Record):
    __slots__ = ('name', 'type', 'orient', 'is_fixed', 'ports',
                 'init_x', 'init_y', 'x', 'y', 'width', 'height')

    def __init__(self, name='', type='', orient='', is_fixed=False,
                 ports=None, init_x=0.0, init_y=0.0, x=0.0, y=0.0,
                 width=0.0, height=0.0):
        self.name = name
        self.type = type
        self.orient = orient
        self.is_fixed = is_fixed
        # port name -> attribute, kept in insertion order for stable dumps
        self.ports = dict(ports) if ports else {}
        self.init_x = init_x
        self.init_y = init_y
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class Row(Record):
    __slots__ = ('name', 'site', 'orig_x', 'orig_y', 'step_x', 'step_y',
                 'num_sites', 'orient')

    def __init__(self, name='', site='', orig_x=0, orig_y=0, step_x=0,
                 step_y=0, num_sites=0, orient=''):
        self.name = name
        self.site = site
        self.orig_x = orig_x
        self.orig_y = orig_y
        self.step_x = step_x
        self.step_y = step_y
        self.num_sites = num_sites
        self.orient = orient


class Site(Record):
    __slots__ = ('name', 'width', 'height', 'type', 'symmetries')

    def __init__(self, name='', width=0.0, height=0.0, type='',
                 symmetries=None):
        self.name = name
        self.width = width
        self.height = height
        self.type = type
        self.symmetries = list(symmetries) if symmetries else []


class DensityBin(Record):
    """Utilization figures for one placement-density bin."""
    __slots__ = ('area', 'm_util', 'f_util', 'free_space', 'overflow',
                 'density_limit')

    def __init__(self, area=0.0, m_util=0.0, f_util=0.0, free_space=0.0,
                 overflow=0.0, density_limit=0.0):
        self.area = area
        self.m_util = m_util
        self.f_util = f_util
        self.free_space = free_space
        self.overflow = overflow
        self.density_limit = density_limit
