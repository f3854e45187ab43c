"""
Name=value pairs carried as ValueOption values (e.g. "album=Testing the Testers").
"""
from .faults import InvalidPairError
from .validation import is_legal_name


class NameValuePair:
    """
    A "name=value" token split on its first "=".

    - "album=Testing the Testers" -> name "album", value "Testing the Testers"
    - "song"                      -> name "song", value ""
    - "a=b=c"                     -> name "a", value "b=c"

    The name must be legal (see is_legal_name); the token must not be empty.
    """
    __slots__ = ("_name", "_value")

    def __init__(self, token, /):
        if not isinstance(token, str):
            raise TypeError("name-value-pair token must be a string")
        if not token:
            raise InvalidPairError("name-value-pair token cannot be empty", token=token)
        name, _, value = token.partition("=")
        if not is_legal_name(name):
            raise InvalidPairError(f"name-value-pair name {name!r} is not a legal name", token=token)
        self._name = name
        self._value = value

    @property
    def name(self):
        return self._name

    @property
    def value(self):
        return self._value

    def __eq__(self, other):
        if not isinstance(other, NameValuePair):
            return NotImplemented
        return (self._name, self._value) == (other._name, other._value)

    def __hash__(self):
        return hash((self._name, self._value))

    def __repr__(self):
        return f"name-value-pair(name={self._name!r}, value={self._value!r})"


def parse_pair(token, /):
    """
    Build a NameValuePair from token, or return None when token is not a valid pair.
    """
    try:
        return NameValuePair(token)
    except InvalidPairError:
        return None


__all__ = (
    "NameValuePair",
    "parse_pair",
)
