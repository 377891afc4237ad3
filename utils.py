def _type_names(type_):
    if isinstance(type_, tuple):
        return " or ".join(t.__name__ for t in type_)
    return type_.__name__


def pmts(v, type_, extra_information=""):
    """Poor man's type system; `type_` may be a tuple of types, as for isinstance.

    >>> pmts(3, int)
    >>> pmts(3, (int, float))
    >>> pmts("3", (int, float))
    Traceback (most recent call last):
    ...
    AssertionError: Expected value of type 'int or float' but is type 'str'
    """
    assert isinstance(v, type_), "Expected value of type '%s' but is type '%s'%s" % (
        _type_names(type_),
        type(v).__name__,
        "" if not extra_information else "; %s" % extra_information
        )
