from imeswitch.core.app_settings import NOT_A_VARIANT_INDEX
from imeswitch.core.item import Item, compare_items, language_subtag

SYSTEM_LOCALE = "en_US"


def make_item(provider, variant_name, locale_tag, index, system_locale=SYSTEM_LOCALE):
    return Item(provider, variant_name, index, locale_tag, True, system_locale)


def test_language_subtag():
    assert language_subtag("en_US") == "en"
    assert language_subtag("EN-gb") == "en"
    assert language_subtag("ja") == "ja"
    assert language_subtag("") == ""
    assert language_subtag(None) == ""


def test_system_locale_flags():
    locales = ["en_US", "fr", "en", "en_uk", "enn", "e", "EN_US"]
    items = {
        loc: make_item("LatinIme", loc, loc, i) for i, loc in enumerate(locales)
    }

    assert items["en_US"].is_system_locale
    assert items["EN_US"].is_system_locale  # case-insensitive
    for loc in ("fr", "en", "en_uk", "enn", "e"):
        assert not items[loc].is_system_locale, loc

    for loc in ("en_US", "EN_US", "en", "en_uk"):
        assert items[loc].is_system_language, loc
    for loc in ("fr", "enn", "e"):
        assert not items[loc].is_system_language, loc


def test_empty_locale_is_never_system():
    item = Item("NoVariantIme", None, NOT_A_VARIANT_INDEX, "", False, SYSTEM_LOCALE)
    assert not item.is_system_locale
    assert not item.is_system_language
    assert not item.has_variant
    assert item.locale_priority == 2


def test_none_locale_normalised_to_empty():
    item = Item("NoVariantIme", None, NOT_A_VARIANT_INDEX, None, False, SYSTEM_LOCALE)
    assert item.locale_tag == ""
    assert item == Item("NoVariantIme", None, NOT_A_VARIANT_INDEX, "", True, "ja_JP")


def test_comparator_total_order():
    items = []
    index = 0
    for provider in ("X", "Y", ""):
        for variant in ("A", "Z", ""):
            for loc in ("en_US", "en", "ja"):
                items.append(make_item(provider, variant, loc, index))
                index += 1

    for i, a in enumerate(items):
        assert compare_items(a, a) == 0
        assert a.compare_to(a) == 0
        for b in items[i + 1 :]:
            assert compare_items(a, b) < 0, (a, b)
            assert compare_items(b, a) > 0, (b, a)
            assert a < b


def test_comparator_transitive_over_sample():
    items = [
        make_item("P1", "A", "en_US", 0),
        make_item("P1", "A", "en_GB", 1),
        make_item("P1", "B", "fr", 2),
        make_item("P2", None, "ja_JP", NOT_A_VARIANT_INDEX),
        make_item("P2", "C", "de", 3),
    ]
    for a in items:
        for b in items:
            for c in items:
                if compare_items(a, b) < 0 and compare_items(b, c) < 0:
                    assert compare_items(a, c) < 0


def test_non_system_locales_tie():
    first = make_item("X", "A", "ja_JP", 0, system_locale="en_us")
    second = make_item("X", "A", "hi_IN", 1, system_locale="en_us")
    assert compare_items(first, second) == 0
    assert compare_items(second, first) == 0
    assert first != second


def test_equality_ignores_derived_and_display_fields():
    a = Item("LatinIme", "English", 0, "en_US", True, "en_US")
    b = Item("LatinIme", "Anglais", 0, "en_US", False, "fr_FR")
    assert a == b
    assert hash(a) == hash(b)
    assert a.is_system_locale and not b.is_system_locale

    assert a != Item("LatinIme", "English", 1, "en_US", True, "en_US")
    assert a != Item("LatinIme", "English", 0, "en_GB", True, "en_US")
    assert a != Item("OtherIme", "English", 0, "en_US", True, "en_US")


def test_str_is_readable():
    item = make_item("LatinIme", "fr", "fr", 1)
    assert str(item) == "LatinIme/fr (index=1, locale=fr)"
    bare = Item("Bare", None, NOT_A_VARIANT_INDEX, "", False, SYSTEM_LOCALE)
    assert str(bare) == "Bare/- (index=-1, locale=-)"


def test_sort_key_matches_comparator():
    items = [
        make_item(provider, variant, loc, index)
        for index, (provider, variant, loc) in enumerate(
            (p, v, loc)
            for p in ("Y", "", "X")
            for v in ("Z", None, "A", "")
            for loc in ("ja", "en_US", "en")
        )
    ]
    for a in items:
        for b in items:
            by_key = (a.sort_key() > b.sort_key()) - (a.sort_key() < b.sort_key())
            assert by_key == compare_items(a, b), (a, b)


def test_hyphenated_locale_tags():
    item = make_item("LatinIme", "en-GB", "en-GB", 0)
    assert item.is_system_language
    assert not item.is_system_locale
