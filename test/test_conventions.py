import newspath
from newspath.conventions import Folder, Identity, abbr_folder
from newspath.path import PathRecord


def test_abbr_folder():
    assert abbr_folder('comp.lang.c', 'comp', sep='.') == '=lang.c'
    assert abbr_folder('comp.lang.c', 'comp.lang', sep='.') == '=c'
    assert abbr_folder('comp.lang.c', 'comp.', sep='.') == '=lang.c'
    assert abbr_folder('/home/a/Mail/inbox', '/home/a/Mail/') == '=inbox'


def test_abbr_folder_not_applicable():
    assert abbr_folder('comp', 'comp', sep='.') is None
    assert abbr_folder('comp.', 'comp', sep='.') is None
    assert abbr_folder('compx.lang', 'comp', sep='.') is None
    assert abbr_folder('comp.lang', '', sep='.') is None
    assert abbr_folder('comp.lang', '.', sep='.') is None
    assert abbr_folder('alt.comp', 'comp', sep='.') is None


def test_identity():
    r = PathRecord('NEWS://host/comp.lang')
    assert r.asLocal() == 'NEWS://host/comp.lang'
    assert Identity.asLocal(r) == r.original
    assert r.asStr() == r.original


def test_folder():
    conventions = Folder('news://host/comp')
    assert PathRecord('news://host/comp.lang.c').asLocal(conventions) == '=lang.c'
    # not below the root, falls back to the full path
    assert PathRecord('news://other/comp.lang.c').asLocal(conventions) == 'news://other/comp.lang.c'
