""" A PathRecord is the working representation of a mailbox address.
It starts life as whatever string the user typed or the config file
held, and accumulates a tidy form, a canonical form, and the kind of
system that owns it as the operations in newspath.core are applied.

Records are mutated in place by tidy and canon, everything else either
reads them or makes a brand new record (parent). """

import enum
from newspath import conventions as conv
from newspath import exceptions as exc
from newspath.utils import log


class PathFlags(enum.Flag):
    CANONICAL = enum.auto()  # canonical was set by canon and can be trusted
    TIDY = enum.auto()  # original has a lowercase scheme and no password
    RESOLVED = enum.auto()  # derived by us, e.g. a parent, not supplied by a user


class PathRecord:

    _local_conventions = conv.Identity

    def __init__(self, original, kind=None, canonical=None, status=PathFlags(0)):
        if not isinstance(original, str):
            raise TypeError(f'original must be a string not {type(original)}')

        self.original = original
        self.canonical = canonical
        self.kind = kind
        self.status = status

    def asLocal(self, conventions=None):
        if conventions is None:
            conventions = self._local_conventions

        return conventions.asLocal(self)

    @property
    def is_canonical(self):
        return self.canonical is not None and bool(self.status & PathFlags.CANONICAL)

    def asStr(self):
        return self.original

    def __eq__(self, other):
        if not isinstance(other, PathRecord):
            return NotImplemented

        return (self.original == other.original and
                self.canonical == other.canonical and
                self.kind is other.kind and
                self.status == other.status)

    # records are mutable, they cannot be dictionary keys, use canonical instead
    __hash__ = None

    def __repr__(self):
        kind = None if self.kind is None else self.kind.__name__
        return (f'{self.__class__.__name__}({self.original!r}, kind={kind}, '
                f'canonical={self.canonical!r}, status={self.status!r})')


class HelpTestPaths:
    """ Mix into a unittest.TestCase along with system, ids, and ids_bad
        to check the properties that every path system has to have. """

    system = None
    ids = tuple()
    ids_bad = tuple()
    default_user = None
    default_port = None

    @staticmethod
    def setUpClass():
        if not hasattr(HelpTestPaths, '_pickle'):
            import copy
            HelpTestPaths._copy = copy
            import pickle
            HelpTestPaths._pickle = pickle
            from joblib import Parallel, delayed
            HelpTestPaths._Parallel = Parallel
            HelpTestPaths._delayed = staticmethod(delayed)
            from newspath.url import parse
            HelpTestPaths._parse = staticmethod(parse)

    def _record(self, original):
        return PathRecord(original, kind=self.system)

    def _canonical(self, original):
        record = self._record(original)
        self.system.canon(record, self.default_user, self.default_port)
        return record

    def test_probe(self):
        bads = [i for i in self.ids if self.system.probe(i) is not self.system]
        assert not bads, bads

    def test_tidy_idempotent(self):
        bads = []
        for i in self.ids:
            r = self._record(i)
            self.system.tidy(r)
            once = r.original
            self.system.tidy(r)
            if r.original != once or not r.status & PathFlags.TIDY:
                bads.append((i, once, r.original))

        assert not bads, bads

    def test_canon_deterministic(self):
        bads = []
        for i in self.ids:
            r1 = self._canonical(i)
            r2 = self._canonical(i)
            if r1.canonical != r2.canonical or not r1.status & PathFlags.CANONICAL:
                bads.append((i, r1.canonical, r2.canonical))

            if r1.original != i:
                bads.append((i, 'canon changed original', r1.original))

        assert not bads, bads

    def test_no_password(self):
        bads = []
        for i in self.ids:
            r = self._canonical(i)
            if self._parse(r.canonical).password is not None:
                bads.append(r)

            self.system.tidy(r)
            if self._parse(r.original).password is not None:
                bads.append(r)

        assert not bads, bads

    def test_compare_reflexive(self):
        bads = []
        for i in self.ids:
            r1 = self._canonical(i)
            r2 = self._canonical(i)
            if self.system.compare(r1, r2) != 0:
                bads.append(i)

        assert not bads, bads

    def test_compare_needs_canonical(self):
        r1 = self._canonical(self.ids[0])
        r2 = self._record(self.ids[0])
        for args in ((r1, r2), (r2, r1)):
            try:
                self.system.compare(*args)
                assert False, 'should have failed'
            except exc.NotCanonicalError:
                pass

    def test_parent(self):
        bads = []
        for i in self.ids:
            r = self._record(i)
            p = self.system.parent(r)
            if p is None:
                continue

            if (p.kind is not r.kind or
                p.canonical is not None or
                p.status != PathFlags.RESOLVED | PathFlags.TIDY):
                bads.append((i, p))

            tidied = self._record(p.original)
            self.system.tidy(tidied)
            if tidied.original != p.original:
                bads.append((i, 'parent not tidy', p.original, tidied.original))

        assert not bads, bads

    def test_malformed(self):
        bads = []
        operations = (
            self.system.tidy,
            lambda r: self.system.canon(r, self.default_user, self.default_port),
            self.system.parent,
        )
        for i in self.ids_bad:
            r = self._record(i)
            for op in operations:
                try:
                    op(r)
                    bads.append((i, op))
                except exc.MalformedPathError as e:
                    log.debug(e)

            if r != self._record(i):
                bads.append((i, 'modified', r))

        assert not bads, bads

    def test_pickle_copy(self):
        bads = []
        for i in self.ids:
            r = self._canonical(i)
            tv = self._pickle.loads(self._pickle.dumps(r))
            if tv != r or self.system.compare(tv, r) != 0:
                bads.append((tv, r))

            tv = self._copy.deepcopy(r)
            if tv != r or tv is r:
                bads.append((tv, r))

        assert not bads, bads

    def test_parallel(self):
        def work(i):
            r = self._record(i)
            self.system.tidy(r)
            self.system.canon(r, self.default_user, self.default_port)
            return r.canonical

        serial = [work(i) for i in self.ids]
        parallel = self._Parallel(n_jobs=2, prefer='threads')(
            self._delayed(work)(i) for i in self.ids)
        assert parallel == serial, (parallel, serial)
