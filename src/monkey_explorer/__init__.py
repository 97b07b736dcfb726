"""browse a fixed catalog of monkeys and count random picks"""

__version__ = "0.1.0"
