
class HashConsError(Exception):
    """ Base class for all hash-consing errors"""
    pass

class HashConsInvariantError(HashConsError):
    """ Raised when reference-count bookkeeping is found corrupted (fatal)"""
    pass

class HashConsDoubleRelease(HashConsInvariantError):
    """ Raised when a handle, cell or table is released past zero"""

class HashConsTableNotEmpty(HashConsInvariantError):
    """ Raised when a table is freed while cells are still registered in it"""

class HashConsUseAfterFree(HashConsInvariantError):
    """ Raised when a freed cell, released handle or freed table is used"""

class HashConsTableMismatch(HashConsError):
    """ Raised when handles from different strict tables are compared"""
