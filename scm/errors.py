

class ScmError(Exception):
    """ Base class for all scm errors"""
    pass

class ScmSyntaxError(ScmError):
    """ Raised when source text cannot be read into a syntax tree"""

class ScmUnboundVariable(ScmError):
    """ Raised when a variable is referenced before it is bound"""

class ScmUnboundAssignment(ScmError):
    """ Raised when set! targets a name with no binding anywhere in the chain"""

class ScmTypeError(ScmError):
    """ Raised when an operand has the wrong runtime type"""

class ScmArityError(ScmError):
    """ Raised when the number of operands or arguments is incorrect"""

class ScmDivisionByZero(ScmError):
    """ Raised when dividing by a zero-valued operand"""

class ScmOverflow(ScmError):
    """ Raised when an integer result leaves the fixed-width range"""

class ScmUndefinedOperation(ScmError):
    """ Raised for mathematically undefined results such as 0^0"""

class ScmMalformedForm(ScmError):
    """ Raised when a special form violates its grammar"""

class ScmInvalidVariableName(ScmError):
    """ Raised when a binding introduces an invalid identifier"""

class ScmNotAProcedure(ScmError):
    """ Raised when the head of an application is not applicable"""

class ScmIncompleteInput(ScmSyntaxError):
    """ Raised when source text ends inside an unfinished form"""
