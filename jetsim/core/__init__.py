from jetsim.core.parser import parse_file, parse_string
from jetsim.core.kinematics import primitive_to_points, toolpath_to_points

__all__ = ["parse_file", "parse_string", "primitive_to_points", "toolpath_to_points"]
