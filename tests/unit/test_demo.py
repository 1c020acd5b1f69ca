from fastscroll.__main__ import format_sections, main, make_demo_items
from fastscroll.applist import AlphabeticalItemList


def test_make_demo_items_is_seeded():
    first = make_demo_items(10, seed=3)
    second = make_demo_items(10, seed=3)

    assert [item.title for item in first] == [item.title for item in second]
    assert first[0].id == "box-1"
    assert first[0].title.endswith("-Box 1")


def test_format_sections_without_layout():
    apps = AlphabeticalItemList()
    apps.set_items(make_demo_items(5, seed=1))

    table = format_sections(apps)

    assert table.splitlines()[-1] == f"5 entries, {len(apps.fast_scroll_sections)} sections, 0 rows"


def test_main_prints_table(capsys):
    main(["--count", "20", "--per-row", "4", "--seed", "7", "--policy", "by_rows"])

    out = capsys.readouterr().out
    assert out.splitlines()[0].startswith("section")
    assert "20 entries" in out
    assert "5 rows" in out
