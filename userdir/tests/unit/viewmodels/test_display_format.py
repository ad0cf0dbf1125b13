from dataclasses import replace

from userdir.domain.entities import Address
from userdir.viewmodels import display_format as fmt


def test_counts_and_hints() -> None:
    assert fmt.plural_users(1) == "1 user"
    assert fmt.results_hint(0) == "0 users found"
    assert fmt.compact_count(999) == "999"
    assert fmt.compact_count(1234) == "1.2k"
    assert fmt.grouped_count(1234) == "1,234"


def test_footer_label_mentions_search_term() -> None:
    assert fmt.footer_label(8, 12) == "Showing 8 of 12 users"
    assert fmt.footer_label(1, 1, "  ada ") == 'Showing 1 of 1 user matching "ada"'


def test_website_url_adds_scheme_only_when_missing() -> None:
    assert fmt.website_url("hildegard.org") == "http://hildegard.org"
    assert fmt.website_url("https://example.org") == "https://example.org"
    assert fmt.website_url("") == ""


def test_address_label_orders_parts(make_user) -> None:
    record = make_user(3, "Clementine Bauch", city="McKenziehaven")
    assert fmt.address_label(record) == "3 Main St, McKenziehaven"
    assert fmt.address_label(record, city_first=True) == "McKenziehaven, 3 Main St"

    no_street = replace(make_user(4), address=Address(street="", city="South Elvis"))
    assert fmt.address_label(no_street) == "South Elvis"
