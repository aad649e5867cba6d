"""
tests/test_catalog.py

Properties of the shipped technique catalog and its query functions.
"""

import json

import pytest

from technique_library import catalog
from technique_library.catalog import (
    ALL,
    TECHNIQUES,
    CatalogIssue,
    export_catalog,
    filter_techniques,
    get_related_techniques,
    get_stats,
    get_technique_by_id,
    get_techniques_by_category,
    get_techniques_by_difficulty,
    get_techniques_by_position,
    group_by_category,
    load_techniques,
    search_techniques,
    validate_catalog,
)
from technique_library.models import Category, Difficulty, Position, Technique
from technique_library.techniques_data import all_techniques


def _declared_count():
    return sum(len(section["items"]) for section in all_techniques.values())


def _ids(techniques):
    return [t.id for t in techniques]


class TestShippedData:
    """The record set itself"""

    def test_every_declared_record_is_loaded(self) -> None:
        assert len(TECHNIQUES) == _declared_count()

    def test_ids_are_unique(self) -> None:
        ids = _ids(TECHNIQUES)
        assert len(ids) == len(set(ids))

    def test_values_come_from_closed_sets(self) -> None:
        for technique in TECHNIQUES:
            assert technique.category in set(Category)
            assert technique.difficulty in set(Difficulty)
            if technique.starting_position is not None:
                assert technique.starting_position in set(Position)
            if technique.ending_position is not None:
                assert technique.ending_position in set(Position)

    def test_points_are_never_negative(self) -> None:
        for technique in TECHNIQUES:
            assert technique.points is None or technique.points >= 0

    def test_sections_follow_category_order(self) -> None:
        assert list(all_techniques) == [c.value for c in Category]

    def test_sections_hold_only_items(self) -> None:
        for section in all_techniques.values():
            assert set(section) == {"items"}

    def test_no_duplicate_ids_reported(self) -> None:
        kinds = {issue.kind for issue in validate_catalog()}
        assert "duplicate-id" not in kinds


class TestLookup:
    """get_technique_by_id"""

    def test_armbar_record(self) -> None:
        armbar = get_technique_by_id("armbar")

        assert armbar is not None
        assert armbar.name == "Armbar"
        assert armbar.category == Category.SUBMISSION
        assert armbar.difficulty == Difficulty.FUNDAMENTAL
        assert armbar.starting_position == Position.MULTIPLE
        assert armbar.gi_legal and armbar.no_gi_legal
        assert armbar.points == 0

    def test_missing_id_returns_none(self) -> None:
        assert get_technique_by_id("flying-scissor-heel-hook") is None

    def test_lookup_is_case_sensitive(self) -> None:
        assert get_technique_by_id("Armbar") is None

    def test_dangling_related_ids_resolve_to_none(self) -> None:
        rnc = get_technique_by_id("rnc")

        assert "body-triangle" in rnc.related_techniques
        assert get_technique_by_id("body-triangle") is None


class TestCategoryAndDifficulty:
    """get_techniques_by_category / get_techniques_by_difficulty"""

    @pytest.mark.parametrize("category", list(Category))
    def test_category_filter(self, category) -> None:
        results = get_techniques_by_category(category)

        assert results
        assert all(t.category == category for t in results)
        assert len(results) == len(all_techniques[category.value]["items"])

    def test_category_filter_accepts_identifier_string(self) -> None:
        assert get_techniques_by_category("guard-pass") == get_techniques_by_category(Category.GUARD_PASS)

    def test_unknown_category_is_empty(self) -> None:
        assert get_techniques_by_category("strikes") == []

    def test_category_filter_is_idempotent(self) -> None:
        once = get_techniques_by_category(Category.SWEEP)
        twice = filter_techniques(category=Category.SWEEP, techniques=once)

        assert twice == once

    def test_results_keep_declaration_order(self) -> None:
        results = get_techniques_by_difficulty(Difficulty.ADVANCED)
        positions = [TECHNIQUES.index(t) for t in results]

        assert positions == sorted(positions)

    def test_armbar_is_fundamental(self) -> None:
        assert "armbar" in _ids(get_techniques_by_difficulty("fundamental"))


class TestPosition:
    """get_techniques_by_position"""

    @pytest.mark.parametrize("position", list(Position))
    def test_start_or_end_matches(self, position) -> None:
        results = get_techniques_by_position(position)
        expected = [
            t for t in TECHNIQUES
            if t.starting_position == position or t.ending_position == position
        ]

        assert results == expected

    def test_mount_includes_both_directions(self) -> None:
        ids = _ids(get_techniques_by_position(Position.MOUNT))

        # starts in mount
        assert "ezekiel-choke" in ids
        # ends in mount
        assert "scissor-sweep" in ids

    def test_records_without_positions_never_match(self) -> None:
        unpositioned = get_technique_by_id("mount-position")
        assert unpositioned.starting_position is None
        assert unpositioned.ending_position is None

        for position in Position:
            assert unpositioned not in get_techniques_by_position(position)


class TestSearch:
    """search_techniques"""

    def test_case_insensitive(self) -> None:
        assert search_techniques("RNC") == search_techniques("rnc")
        assert search_techniques("Kimura") == search_techniques("kIMURA")

    def test_matches_aliases(self) -> None:
        assert "armbar" in _ids(search_techniques("juji"))

    def test_matches_key_points(self) -> None:
        rnc = get_technique_by_id("rnc")
        point = rnc.key_points[0]

        assert rnc in search_techniques(point.upper())

    def test_matches_description_substring(self) -> None:
        assert "rnc" in _ids(search_techniques("highest-percentage"))

    def test_broader_term_is_superset(self) -> None:
        narrow = set(_ids(search_techniques("rear-naked choke")))
        broad = set(_ids(search_techniques("choke")))

        assert narrow
        assert narrow <= broad

    def test_empty_query_returns_everything(self) -> None:
        assert search_techniques("") == list(TECHNIQUES)

    def test_no_match(self) -> None:
        assert search_techniques("spinning back fist") == []


class TestStats:
    """get_stats"""

    def test_totals_are_consistent(self) -> None:
        stats = get_stats()

        assert stats.total == len(TECHNIQUES) == _declared_count()
        assert sum(stats.by_category.values()) == stats.total
        assert sum(stats.by_difficulty.values()) == stats.total

    def test_difficulty_keys_are_limited(self) -> None:
        assert set(get_stats().by_difficulty) <= {"fundamental", "intermediate", "advanced"}

    def test_maps_are_sparse(self) -> None:
        stats = get_stats(get_techniques_by_category(Category.BACK_TAKE))

        assert stats.by_category == {"back-take": stats.total}
        assert all(count > 0 for count in stats.by_difficulty.values())

    def test_shipped_counts(self) -> None:
        stats = get_stats()

        assert stats.by_difficulty == {"fundamental": 44, "intermediate": 39, "advanced": 16}
        assert stats.by_category["submission"] == 33
        assert stats.by_category["back-take"] == 5


class TestFilterTechniques:
    """filter_techniques"""

    def test_no_filters_returns_everything(self) -> None:
        assert filter_techniques() == list(TECHNIQUES)

    def test_filters_combine_with_and(self) -> None:
        results = filter_techniques(query="choke", category="submission", difficulty="advanced")

        assert results
        for technique in results:
            assert technique.category == Category.SUBMISSION
            assert technique.difficulty == Difficulty.ADVANCED
            assert technique in search_techniques("choke")

    def test_result_does_not_depend_on_order(self) -> None:
        by_search_first = filter_techniques(query="guard", difficulty="intermediate")
        by_difficulty_first = search_techniques(
            "guard", get_techniques_by_difficulty("intermediate")
        )

        assert by_search_first == by_difficulty_first

    def test_all_skips_filter(self) -> None:
        assert filter_techniques(category=ALL, difficulty="advanced") == get_techniques_by_difficulty("advanced")

    def test_empty_query_is_skipped(self) -> None:
        assert filter_techniques(query="", category="sweep") == get_techniques_by_category("sweep")


class TestGroupByCategory:
    """group_by_category"""

    def test_buckets_follow_enum_order(self) -> None:
        # declared out of order on purpose
        mixed = [
            get_technique_by_id("upa"),
            get_technique_by_id("scissor-sweep"),
            get_technique_by_id("armbar"),
        ]

        groups = group_by_category(mixed)

        assert [category for category, _ in groups] == [
            Category.SUBMISSION,
            Category.SWEEP,
            Category.ESCAPE,
        ]

    def test_empty_buckets_are_omitted(self) -> None:
        groups = group_by_category(get_techniques_by_category(Category.GUARD))

        assert len(groups) == 1
        assert groups[0][0] == Category.GUARD

    def test_grouping_keeps_every_record(self) -> None:
        groups = group_by_category(TECHNIQUES)

        assert sum(len(items) for _, items in groups) == len(TECHNIQUES)


class TestRelatedAndValidation:
    """get_related_techniques / validate_catalog"""

    def test_related_resolves_known_ids(self) -> None:
        related = get_related_techniques(get_technique_by_id("armbar"))

        assert _ids(related) == ["triangle-choke", "omoplata"]

    def test_dangling_references_are_skipped(self) -> None:
        assert get_related_techniques(get_technique_by_id("rnc")) == []

    def test_shipped_dangling_references_are_reported(self) -> None:
        issues = validate_catalog()

        assert CatalogIssue(
            "dangling-reference", "rnc", "related technique 'body-triangle' does not exist"
        ) in issues

    def test_duplicate_ids_are_reported(self) -> None:
        armbar = get_technique_by_id("armbar")

        issues = validate_catalog([armbar, armbar])

        assert [issue.kind for issue in issues if issue.kind == "duplicate-id"] == ["duplicate-id"]

    def test_validation_never_raises_on_bad_references(self) -> None:
        broken = Technique(
            id="ghost",
            name="Ghost",
            category=Category.SWEEP,
            difficulty=Difficulty.ADVANCED,
            description="Points nowhere.",
            gi_legal=True,
            no_gi_legal=True,
            related_techniques=("nothing-here",),
        )

        issues = validate_catalog([broken])

        assert [issue.kind for issue in issues] == ["dangling-reference"]
        assert get_related_techniques(broken) == []


class TestLoadAndExport:
    """load_techniques / export_catalog"""

    def test_load_rejects_unknown_difficulty(self) -> None:
        data = {
            "sweep": {
                "name": "sweeps",
                "items": {
                    "odd-sweep": {
                        "name": "Odd Sweep",
                        "difficulty": "legendary",
                        "description": "Not a real level.",
                        "gi_legal": True,
                        "no_gi_legal": True,
                    },
                },
            },
        }

        with pytest.raises(ValueError):
            load_techniques(data)

    def test_export_round_trips_identifiers(self) -> None:
        exported = json.loads(export_catalog())

        assert len(exported) == len(TECHNIQUES)
        assert exported[0]["id"] == TECHNIQUES[0].id
        assert {record["difficulty"] for record in exported} <= {d.value for d in Difficulty}

    def test_export_keeps_non_ascii(self) -> None:
        assert "Mata Leão" in export_catalog([get_technique_by_id("rnc")])

    def test_catalog_is_immutable(self) -> None:
        assert isinstance(catalog.TECHNIQUES, tuple)
        with pytest.raises(AttributeError):
            TECHNIQUES[0].name = "Changed"
