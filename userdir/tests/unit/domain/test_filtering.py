from __future__ import annotations

from userdir.domain.filtering import filter_records, normalize_term


def test_empty_and_blank_terms_return_all_records_in_order(twelve_users) -> None:
    assert filter_records(twelve_users, "") == twelve_users
    assert filter_records(twelve_users, "   ") == twelve_users
    assert filter_records(twelve_users, None) == twelve_users


def test_matches_name_email_or_company_case_insensitively(make_user) -> None:
    by_name = make_user(1, "Alice Carter", email="a@x.io", company="Zeta")
    by_email = make_user(2, "Bob Stone", email="CARTERS@mail.io", company="Zeta")
    by_company = make_user(3, "Cleo Park", email="c@x.io", company="Cartercorp")
    by_username_only = make_user(4, "Dan Moss", username="carter", email="d@x.io", company="Zeta")
    records = [by_name, by_email, by_company, by_username_only]

    result = filter_records(records, "  CaRtEr ")

    assert result == [by_name, by_email, by_company]


def test_no_match_returns_empty_list(twelve_users) -> None:
    assert filter_records(twelve_users, "zzz-no-such-user") == []


def test_result_matches_brute_force_definition(twelve_users) -> None:
    for term in ("an", "LE", "keebler", "example", "crist", "q"):
        expected = [
            record
            for record in twelve_users
            if any(
                term.lower() in text.lower()
                for text in (record.name, record.email, record.company.name)
            )
        ]
        assert filter_records(twelve_users, term) == expected


def test_filter_does_not_mutate_input(twelve_users) -> None:
    before = list(twelve_users)
    filter_records(twelve_users, "an")
    assert twelve_users == before


def test_normalize_term() -> None:
    assert normalize_term("  Foo ") == "foo"
    assert normalize_term(None) == ""
