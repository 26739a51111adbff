

class CellaError(Exception):
    """ Base class for all Cella errors"""
    pass

class CellaTypeMismatch(CellaError):
    """ Raised when an accessor or downcast receives a value of the wrong kind"""
    pass

class CellaUnboundSymbol(CellaError):
    """ Raised when a symbol is looked up or assigned before it is bound"""
    pass

class CellaMalformedList(CellaError):
    """ Raised when a list is not terminated by the empty list"""

class CellaArityError(CellaMalformedList):
    """ Raised when the number of arguments passed to a form is incorrect"""

class CellaNotCallable(CellaError):
    """ Raised when the operator of an application is not a procedure"""

class CellaNullApplication(CellaNotCallable):
    """ Raised when the operator of an application evaluates to the empty list"""

class CellaCapacityExceeded(CellaError):
    """ Raised when an arena pool is full"""

class CellaOutOfBounds(CellaError):
    """ Raised when an arena handle does not refer to an allocated record"""
