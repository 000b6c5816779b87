from .errors import FuncpyError, NoSuchElementError
from .std import equals, hash_code
from .logger import ConsoleLogger, configure
from .option import Option, Some, NONE, from_nullable
from .either import Either, Left, Right
from .result import Try, Success, Failure, from_either as try_from_either, to_either as try_to_either
