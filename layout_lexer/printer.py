"""Diagnostic printer: renders layout records as banner-framed text dumps.

Used for debugging and log comparison. The output is stable (fixed field
order, ports in insertion order, symmetries in declaration order) but is not
meant to be fed back into the lexer.
"""


def _num(value):
    """Format floats with ``%g`` so 100.0 prints as ``100``."""
    if isinstance(value, float):
        return format(value, 'g')
    return str(value)


def _pair(a, b):
    return f"{_num(a)}, {_num(b)}"


class RecordPrinter:
    """Emit diagnostic text from layout records."""

    def emit(self, record):
        """Dispatch to the appropriate emit method."""
        method = '_emit_' + type(record).__name__
        fn = getattr(self, method, None)
        if fn is None:
            raise TypeError(f"Cannot render {type(record).__name__!r} object")
        return '\n'.join(fn(record))

    # ---- Cell ----

    def _emit_Cell(self, node):
        lines = [
            "|=== BEGIN CELL ===|",
            f"name:               {node.name}",
            f"type:               {node.type}",
            f"orient:             {node.orient}",
            f"isFixed?            {'true' if node.is_fixed else 'false'}",
        ]
        for port, value in node.ports.items():
            lines.append(f"port: {port} - {_num(value)}")
        lines += [
            f"(init_x,  init_y):  {_pair(node.init_x, node.init_y)}",
            f"(x_coord,y_coord):  {_pair(node.x, node.y)}",
            f"[width,height]:      {_pair(node.width, node.height)}",
            "|===  END  CELL ===|",
        ]
        return lines

    # ---- Placement grid ----

    def _emit_Row(self, node):
        return [
            "|=== BEGIN ROW ===|",
            f"name:              {node.name}",
            f"site:              {node.site}",
            f"(origX,origY):     {_pair(node.orig_x, node.orig_y)}",
            f"(stepX,stepY):     {_pair(node.step_x, node.step_y)}",
            f"numSites:          {_num(node.num_sites)}",
            f"orientation:       {node.orient}",
            "|===  END  ROW ===|",
        ]

    def _emit_Site(self, node):
        lines = [
            "|=== BEGIN SITE ===|",
            f"name:               {node.name}",
            f"width:              {_num(node.width)}",
            f"height:             {_num(node.height)}",
            f"type:               {node.type}",
        ]
        for sym in node.symmetries:
            lines.append(f"symmetries:         {sym}")
        lines.append("|===  END  SITE ===|")
        return lines

    # ---- Density ----

    def _emit_DensityBin(self, node):
        return [
            "|=== BEGIN DENSITY_BIN ===|",
            f" area :        {_num(node.area)}",
            f" m_util :      {_num(node.m_util)}",
            f" f_util :      {_num(node.f_util)}",
            f" free_space :  {_num(node.free_space)}",
            f" overflow :    {_num(node.overflow)}",
            f" density limit:{_num(node.density_limit)}",
            "|===  END  DENSITY_BIN ===|",
        ]
