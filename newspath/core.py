""" The host side of the path systems. Each system (see newspath.systems)
knows how to handle one family of addresses, the functions here pick the
right system for a record and hand it over. """

from newspath import config
from newspath import exceptions as exc
from newspath.utils import log

systems = tuple()  # NOTE assigned in newspath.__init__, probed in order


def cmp(a, b):
    return (a > b) - (a < b)


class System:
    """ Base class for all path systems.

        Failures to parse raise MalformedPathError, outcomes that are
        merely not applicable (not ours, no parent, cannot abbreviate)
        return None so that callers can move on to the next thing. """

    prefixes = tuple()

    @classmethod
    def probe(cls, original):
        """ return cls if original belongs to this system else None """
        raise NotImplementedError('implement in subclass')

    @classmethod
    def tidy(cls, record):
        raise NotImplementedError('implement in subclass')

    @classmethod
    def canon(cls, record, user, port):
        raise NotImplementedError('implement in subclass')

    @classmethod
    def compare(cls, record1, record2):
        raise NotImplementedError('implement in subclass')

    @classmethod
    def parent(cls, record):
        raise NotImplementedError('implement in subclass')

    @classmethod
    def pretty(cls, record, display_root):
        raise NotImplementedError('implement in subclass')

    @classmethod
    def defaults(cls, record):
        """ the (user, port) that configuration implies for record """
        raise NotImplementedError('implement in subclass')


def probe(record):
    """ find the system that owns record and set record.kind """
    for system in systems:
        kind = system.probe(record.original)
        if kind is not None:
            log.debug(f'{record.original!r} is a {kind.__name__} path')
            record.kind = kind
            return kind

    log.debug(f'no system recognizes {record.original!r}')
    return None


def _kind(record):
    if record.kind is None and probe(record) is None:
        raise exc.UnknownKindError(record.original)

    return record.kind


def tidy(record):
    return _kind(record).tidy(record)


def canon(record, user=None, port=None):
    """ canonicalize record, defaults that are not passed explicitly
        come from configuration for the kind of record """
    kind = _kind(record)
    if user is None or port is None:
        config_user, config_port = kind.defaults(record)
        if user is None:
            user = config_user
        if port is None:
            port = config_port

    return kind.canon(record, user, port)


def compare(record1, record2):
    for record in (record1, record2):
        if not record.is_canonical:
            raise exc.NotCanonicalError(record.original)

    kind1, kind2 = _kind(record1), _kind(record2)
    if kind1 is not kind2:
        return cmp(kind1.__name__, kind2.__name__)

    return kind1.compare(record1, record2)


def parent(record):
    return _kind(record).parent(record)


def pretty(record, display_root=None):
    if display_root is None:
        display_root = config.folder()
        if display_root is None:
            log.debug('no news-folder configured, nothing to abbreviate against')
            return None

    return _kind(record).pretty(record, display_root)
