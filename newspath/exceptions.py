class NewspathError(Exception):
    """ base class for newspath errors """


class LocalError(NewspathError):
    """ Something went wrong locally and we can do something about it. """


class ConfigurationError(LocalError):
    """ Something went wrong with local configuration. """


class MalformedPathError(NewspathError):
    """ Your input cannot be parsed as an address, therefore we
        will NOT touch the record that holds it. A record with a
        malformed original is left exactly as it was found. """


class NotCanonicalError(LocalError):
    """ An operation that works on canonical forms was handed a
        record that was never canonicalized. Call canon first.

        We refuse rather than guess at defaults because comparing
        against a stale or missing canonical form silently changes
        which accounts match which paths. """


class UnknownKindError(LocalError):
    """ No registered system claims this record. """
