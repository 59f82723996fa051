import pytest

from imeswitch.core.app_settings import NOT_A_VARIANT_INDEX
from imeswitch.core.candidates import (
    ProviderInfo,
    VariantInfo,
    build_candidates,
    get_sorted_candidates,
    items_for_provider,
)
from imeswitch.core.errors import CandidateListError


@pytest.fixture
def providers():
    return [
        ProviderInfo(
            "LatinIme",
            (
                VariantInfo("en_US"),
                VariantInfo("fr", name="Français"),
                VariantInfo("en_US", name="Emoji", is_auxiliary=True),
            ),
        ),
        ProviderInfo("subtypeUnawareIme", (), supports_rotation=False),
        ProviderInfo("JapaneseIme", (VariantInfo("ja_JP"),)),
    ]


def test_items_follow_variant_positions(providers):
    items = items_for_provider(providers[0], "en_US")
    assert [(i.variant_name, i.variant_index, i.locale_tag) for i in items] == [
        ("en_US", 0, "en_US"),
        ("Français", 1, "fr"),
    ]
    assert items[0].is_system_locale
    assert all(i.supports_rotation for i in items)


def test_auxiliary_variants_are_opt_in(providers):
    items = items_for_provider(providers[0], "en_US", include_auxiliary=True)
    assert [i.variant_index for i in items] == [0, 1, 2]
    assert items[2].variant_name == "Emoji"


def test_provider_without_variants_yields_single_item(providers):
    (item,) = items_for_provider(providers[1], "en_US")
    assert item.variant_index == NOT_A_VARIANT_INDEX
    assert item.variant_name is None
    assert item.locale_tag == ""
    assert not item.supports_rotation


def test_hidden_variants_collapse_provider(providers):
    items = build_candidates(providers, "en_US", show_variants=False)
    assert [(i.provider_name, i.variant_index) for i in items] == [
        ("LatinIme", NOT_A_VARIANT_INDEX),
        ("subtypeUnawareIme", NOT_A_VARIANT_INDEX),
        ("JapaneseIme", NOT_A_VARIANT_INDEX),
    ]


def test_build_keeps_enumeration_order(providers):
    items = build_candidates(providers, "en_US")
    assert [i.provider_name for i in items] == [
        "LatinIme",
        "LatinIme",
        "subtypeUnawareIme",
        "JapaneseIme",
    ]


def test_sorted_candidates(providers):
    items = get_sorted_candidates(providers, "en_US")
    # Variant names compare case-sensitively: "Français" sorts before "en_US"
    assert [(i.provider_name, i.variant_index) for i in items] == [
        ("JapaneseIme", 0),
        ("LatinIme", 1),
        ("LatinIme", 0),
        ("subtypeUnawareIme", NOT_A_VARIANT_INDEX),
    ]


def test_duplicate_providers_rejected(providers):
    with pytest.raises(CandidateListError):
        build_candidates(providers + [providers[2]], "en_US")
