import sys

from scanparse.driver import LineResult, parse_line, process
from scanparse.parser.parser import Parser
from scanparse.scanner.scanner import Scanner
from scanparse.token import Token
from scanparse.tree.printer import Printer
from scanparse.tree.tree import ParseNode
from scanparse.type import Type

__version__ = "0.1.0"

# Default is 1000. Every `+` or `*` in a line costs another level of recursion
sys.setrecursionlimit(5000)
