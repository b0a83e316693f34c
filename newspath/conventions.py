from newspath import core


def abbr_folder(path, folder, sep='/'):
    """ Shorten path relative to folder using the mail client convention
        of a leading = for the folder, e.g. comp.lang.c under comp is
        =lang.c when sep is a dot. Returns None when path is not strictly
        below folder, never abbreviates a path down to a bare = """

    if folder.endswith(sep):
        folder = folder[:-len(sep)]

    if not folder:
        return None

    prefix = folder + sep
    if not path.startswith(prefix) or len(path) == len(prefix):
        return None

    return '=' + path[len(prefix):]


class Conventions:
    """ local display conventions """


class Identity(Conventions):

    @staticmethod
    def asLocal(record):
        return record.asStr()


class ConventionsLocal(Conventions):
    """ Base class for all types of local conventions.
        For paths local conventions usually convert a fully
        qualified address into something shorter that only
        makes sense to someone who knows the context, e.g.
        which folder they are currently looking at.

        Local conventions can change at any time, so the result
        of asLocal is for display only and must never be persisted
        or compared. """


class Folder(ConventionsLocal):
    """ abbreviate paths that live below root, leave the rest alone """

    def __init__(self, root=None):
        self.root = root  # None means whatever news-folder is configured

    def asLocal(self, record):
        pretty = core.pretty(record, self.root)
        return record.original if pretty is None else pretty
