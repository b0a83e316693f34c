from newspath import config
from newspath import exceptions as exc
from newspath.core import System, cmp
from newspath.conventions import abbr_folder
from newspath.path import PathRecord, PathFlags
from newspath.url import parse, serialize


def partial_match(value1, value2):
    """ absent on either side matches anything """
    return value1 is None or value2 is None or value1 == value2


class Nntp(System):
    """ Usenet paths, news://host/comp.lang.c and snews:// for tls.
        The path is a newsgroup name, its hierarchy is dot separated
        with the root on the left, comp is the parent of comp.lang """

    prefixes = ('news://', 'snews://')
    separator = '.'

    @classmethod
    def probe(cls, original):
        lowered = original.lower()
        if any(lowered.startswith(prefix) for prefix in cls.prefixes):
            return cls

    @classmethod
    def tidy(cls, record):
        address = parse(record.original)
        address.password = None
        # the scheme is lowercased on the way out
        record.original = serialize(address)
        record.status |= PathFlags.TIDY
        return record

    @classmethod
    def canon(cls, record, user, port):
        """ fill in the implicit user and port, they are passed in
            because they depend on which account the path came from """
        address = parse(record.original)
        if address.user is None:
            address.user = user or None

        if address.port is None:
            address.port = port or None

        address.password = None
        record.canonical = serialize(address)
        record.status |= PathFlags.CANONICAL
        return record

    @staticmethod
    def _canonical_address(record):
        if not record.is_canonical:
            raise exc.NotCanonicalError(record.original)

        return parse(record.canonical)

    @classmethod
    def compare(cls, record1, record2):
        """ Three way comparison of the canonical forms of two records.

            User and port are only compared when both sides have one,
            so news://host/misc matches both news://alice@host/misc and
            news://bob@host/misc while those two do not match each other.
            That is NOT an equivalence relation, it is how configured
            accounts are matched against paths reported by the server. """

        address1 = cls._canonical_address(record1)
        address2 = cls._canonical_address(record2)

        rc = cmp(address1.scheme, address2.scheme)
        if rc:
            return rc

        if address1.user is not None and address2.user is not None:
            rc = cmp(address1.user, address2.user)
            if rc:
                return rc

        rc = cmp(address1.host.lower(), address2.host.lower())
        if rc:
            return rc

        if address1.port is not None and address2.port is not None:
            rc = cmp(address1.port, address2.port)
            if rc:
                return rc

        return cmp(address1.path, address2.path)

    @classmethod
    def parent(cls, record):
        """ None if record is a top level group, otherwise a new record """
        address = parse(record.original)
        head, sep, _ = address.path.rpartition(cls.separator)
        if not sep:
            return None

        address.path = head
        address.password = None
        return PathRecord(serialize(address),
                          kind=record.kind,
                          status=PathFlags.RESOLVED | PathFlags.TIDY)

    @classmethod
    def pretty(cls, record, display_root):
        address = parse(record.original)
        root = parse(display_root)

        if address.scheme != root.scheme:
            return None
        if address.host.lower() != root.host.lower():
            return None
        if not partial_match(address.user, root.user):
            return None
        if not partial_match(address.port, root.port):
            return None

        return abbr_folder(address.path, root.path, sep=cls.separator)

    @classmethod
    def defaults(cls, record):
        scheme = parse(record.original).scheme
        return config.default_user(), config.default_port(scheme)
