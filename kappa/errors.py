class KappaError(Exception):
    """ Base class for all Kappa errors"""


class KappaSyntaxError(KappaError):
    """ Raised when a form is malformed: bad special form shape, odd map literal, reader error"""


class KappaUnboundSymbol(KappaError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""


class KappaTypeError(KappaError):
    """ Raised when a value has the wrong type for its position, e.g. calling a non-function"""


class KappaArityError(KappaError):
    """ Raised when the number of arguments passed to a function or macro is incorrect"""


class KappaIndexError(KappaError):
    """ Raised when a sequence is indexed out of range and no default is given"""
