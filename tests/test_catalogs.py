"""Unit tests for option catalogs and the domain metadata lookups."""

import pytest

import column_options.core.metadata as meta
from column_options.core.catalogs import (
    OptionItem,
    build_catalog,
    event_action_options,
    event_subject_type_options,
    issue_or_pull_request_subject_type_options,
    notification_reason_options,
    notification_subject_type_options,
    subject_type_catalog,
)

CATALOG_FACTORIES = [
    event_action_options,
    event_subject_type_options,
    issue_or_pull_request_subject_type_options,
    notification_subject_type_options,
    notification_reason_options,
]


@pytest.mark.parametrize("factory", CATALOG_FACTORIES)
def test_catalog_sorted_by_label(factory):
    labels = [item.label for item in factory()]
    assert labels == sorted(labels)


@pytest.mark.parametrize("factory", CATALOG_FACTORIES)
def test_catalog_built_once_and_immutable(factory):
    first = factory()
    assert factory() is first
    assert isinstance(first, tuple)


@pytest.mark.parametrize("factory", CATALOG_FACTORIES)
def test_resorting_is_noop(factory):
    catalog = factory()
    assert tuple(sorted(catalog, key=lambda item: item.label)) == catalog


def test_sort_is_ordinal_and_case_sensitive():
    labels = {"a": "beta", "b": "Alpha", "c": "alpha", "d": "Beta"}
    catalog = build_catalog(labels, lambda v: meta.Metadata(labels[v]))
    assert [item.label for item in catalog] == ["Alpha", "Beta", "alpha", "beta"]


def test_sort_is_stable_for_equal_labels():
    catalog = build_catalog(["z", "y", "x"], lambda v: meta.Metadata("Same"))
    assert [item.key for item in catalog] == ["z", "y", "x"]


def test_build_catalog_carries_metadata():
    catalog = build_catalog(["mention"], meta.notification_reason_metadata)
    assert catalog == (
        OptionItem(
            "mention",
            "Mentioned",
            "#0366d6",
            "You were specifically @mentioned in the content",
        ),
    )


def test_subject_type_catalog_by_column_type():
    assert subject_type_catalog("activity") is event_subject_type_options()
    assert subject_type_catalog("issue_or_pr") is issue_or_pull_request_subject_type_options()
    assert subject_type_catalog("notifications") is notification_subject_type_options()
    assert subject_type_catalog("users") == ()
    assert subject_type_catalog(None) == ()


def test_issue_or_pr_catalog_keys():
    assert [item.key for item in issue_or_pull_request_subject_type_options()] == [
        "Issue",
        "PullRequest",
    ]


@pytest.mark.parametrize(
    "lookup",
    [meta.subject_type_metadata, meta.event_action_metadata, meta.notification_reason_metadata],
)
def test_lookups_are_total(lookup):
    result = lookup("something_new")
    assert result.label == "Something new"
    assert result.color is None


def test_every_enumerated_value_has_metadata():
    for value in meta.event_subject_types + meta.notification_subject_types:
        assert meta.subject_type_metadata(value).color is not None
    for value in meta.notification_reasons:
        assert meta.notification_reason_metadata(value).description
