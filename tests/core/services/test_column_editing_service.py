import random

import pytest

from validation_builder.core.models import ConfigState, ValidationRule


def _names(configs):
    return [cfg.name for cfg in configs]


def _assert_partition(ctx):
    claimed = ctx.state.claimed_names
    available = ctx.state.available_columns
    assert len(set(claimed)) == len(claimed)
    assert not set(claimed) & set(available)
    assert set(claimed) | set(available) == set(ctx.universe)


class TestAddColumn:
    def test_claims_first_available_with_default_rule(self, context, editing_service):
        result = editing_service.add_column(context)

        assert result.success is True
        assert result.details == {"column": "store_id"}
        assert context.state.column_configs[0].name == "store_id"
        assert context.state.column_configs[0].validation == ValidationRule(type="string")
        assert "store_id" not in context.state.available_columns
        _assert_partition(context)

    def test_claims_in_universe_order(self, context, editing_service):
        editing_service.add_column(context)
        editing_service.add_column(context)

        assert _names(context.state.column_configs) == ["store_id", "zone_name"]

    def test_noop_when_nothing_available(self, make_configured_context, editing_service, universe):
        ctx = make_configured_context(n=len(universe))
        before = ctx.state

        result = editing_service.add_column(ctx)

        assert result.success is False
        assert ctx.state is before
        assert editing_service.can_add_column(ctx) is False


class TestRemoveColumn:
    def test_returns_name_to_available_sorted(self, make_configured_context, editing_service):
        ctx = make_configured_context(n=2)  # store_id, zone_name
        # display order: store_id (0), zone_name (1)
        result = editing_service.remove_column(ctx, 1)

        assert result.success is True
        assert _names(ctx.state.column_configs) == ["store_id"]
        assert list(ctx.state.available_columns) == sorted(ctx.state.available_columns)
        assert "zone_name" in ctx.state.available_columns
        _assert_partition(ctx)

    def test_index_resolves_against_display_order(self, context, editing_service):
        # Claim zone_name first, then cluster_name via rename, so insertion
        # order differs from sorted order.
        editing_service.add_column(context)  # store_id
        editing_service.rename_column(context, 0, "zone_name")
        editing_service.add_column(context)  # cluster_name (available sorted after rename)
        assert _names(context.state.column_configs) == ["zone_name", "cluster_name"]

        editing_service.remove_column(context, 0)

        assert _names(context.state.column_configs) == ["zone_name"]

    @pytest.mark.parametrize("index", [-1, 5, 100])
    def test_out_of_range_is_rejected(self, make_configured_context, editing_service, index):
        ctx = make_configured_context(n=2)
        before = ctx.state

        result = editing_service.remove_column(ctx, index)

        assert result.success is False
        assert ctx.state is before

    def test_remove_then_add_reclaims_first_available(self, make_configured_context, editing_service):
        ctx = make_configured_context(n=1)  # store_id
        editing_service.remove_column(ctx, 0)
        editing_service.add_column(ctx)

        # Available list was re-sorted on removal, so the first name is the
        # alphabetically smallest one.
        assert _names(ctx.state.column_configs) == ["cluster_name"]
        assert "store_id" in ctx.state.available_columns
        _assert_partition(ctx)


class TestRenameColumn:
    def test_swaps_membership(self, make_configured_context, editing_service):
        ctx = make_configured_context(n=1)  # store_id

        result = editing_service.rename_column(ctx, 0, "location")

        assert result.success is True
        assert _names(ctx.state.column_configs) == ["location"]
        assert "location" not in ctx.state.available_columns
        assert "store_id" in ctx.state.available_columns
        assert list(ctx.state.available_columns) == sorted(ctx.state.available_columns)
        _assert_partition(ctx)

    def test_keeps_rule(self, make_configured_context, editing_service):
        ctx = make_configured_context(n=1)
        editing_service.update_validation(ctx, 0, {"type": "integer", "min": 1})

        editing_service.rename_column(ctx, 0, "node_count")

        assert ctx.state.column_configs[0].validation == ValidationRule(type="integer", min=1)

    def test_rejects_name_claimed_by_another_config(self, make_configured_context, editing_service):
        ctx = make_configured_context(n=2)  # store_id, zone_name
        before = ctx.state

        result = editing_service.rename_column(ctx, 0, "zone_name")

        assert result.success is False
        assert "already configured" in result.message
        assert ctx.state is before

    def test_rejects_unknown_name(self, make_configured_context, editing_service):
        ctx = make_configured_context(n=1)

        result = editing_service.rename_column(ctx, 0, "not_a_column")

        assert result.success is False
        assert ctx.state.claimed_names == ("store_id",)

    def test_same_name_is_noop_success(self, make_configured_context, editing_service):
        ctx = make_configured_context(n=1)
        before = ctx.state

        result = editing_service.rename_column(ctx, 0, "store_id")

        assert result.success is True
        assert ctx.state is before


class TestUpdateValidation:
    def test_shallow_merge_preserves_omitted_fields(self, make_configured_context, editing_service):
        ctx = make_configured_context(n=1)
        editing_service.update_validation(ctx, 0, {"regex": "^[a-z]+$"})
        editing_service.update_validation(ctx, 0, {"allowed_values": ["a", "b"]})

        rule = ctx.state.column_configs[0].validation
        assert rule.regex == "^[a-z]+$"
        assert rule.allowed_values == ("a", "b")
        assert rule.type == "string"

    def test_new_value_replaces_old_entirely(self, make_configured_context, editing_service):
        ctx = make_configured_context(n=1)
        editing_service.update_validation(ctx, 0, {"allowed_values": ["a", "b"]})
        editing_service.update_validation(ctx, 0, {"allowed_values": ["c"]})

        assert ctx.state.column_configs[0].validation.allowed_values == ("c",)

    def test_explicit_none_clears_field(self, make_configured_context, editing_service):
        ctx = make_configured_context(n=1)
        editing_service.update_validation(ctx, 0, {"type": "float", "min": 0, "max": 1.5})
        editing_service.update_validation(ctx, 0, {"min": None})

        rule = ctx.state.column_configs[0].validation
        assert rule.min is None
        assert rule.max == 1.5

    def test_does_not_touch_available_columns(self, make_configured_context, editing_service):
        ctx = make_configured_context(n=1)
        available = ctx.state.available_columns

        editing_service.update_validation(ctx, 0, {"type": "boolean"})

        assert ctx.state.available_columns == available

    def test_rejects_unknown_field(self, make_configured_context, editing_service):
        ctx = make_configured_context(n=1)
        before = ctx.state

        result = editing_service.update_validation(ctx, 0, {"pattern": "x"})

        assert result.success is False
        assert ctx.state is before

    def test_rejects_unknown_type(self, make_configured_context, editing_service):
        ctx = make_configured_context(n=1)

        result = editing_service.update_validation(ctx, 0, {"type": "date"})

        assert result.success is False
        assert ctx.state.column_configs[0].validation.type == "string"

    def test_out_of_range(self, context, editing_service):
        result = editing_service.update_validation(context, 0, {"type": "integer"})
        assert result.success is False

    @pytest.mark.parametrize(
        "partial",
        [
            {"allowed_values": "ab"},
            {"allowed_values": ["a", 1]},
            {"allowed_values": 5},
            {"min": "abc"},
            {"max": True},
            {"min": float("nan")},
            {"regex": 42},
            {"allowed_values": "ab", "min": "abc"},
        ],
    )
    def test_rejects_ill_typed_values(self, make_configured_context, editing_service, partial):
        ctx = make_configured_context(n=1)
        before = ctx.state

        result = editing_service.update_validation(ctx, 0, partial)

        assert result.success is False
        assert ctx.state is before
        assert ctx.state.column_configs[0].validation == ValidationRule()

    def test_accepts_tuple_values_and_float_bounds(self, make_configured_context, editing_service):
        ctx = make_configured_context(n=1)

        result = editing_service.update_validation(
            ctx, 0, {"type": "float", "allowed_values": ("1.5",), "min": 0, "max": 2.5}
        )

        assert result.success is True
        rule = ctx.state.column_configs[0].validation
        assert (rule.allowed_values, rule.min, rule.max) == (("1.5",), 0, 2.5)


class TestQueries:
    def test_display_order_is_sorted_and_restartable(self, context, editing_service):
        for _ in range(3):
            editing_service.add_column(context)  # store_id, zone_name, cluster_name

        first = list(editing_service.iter_display_order(context))
        second = list(editing_service.iter_display_order(context))

        assert _names(first) == ["cluster_name", "store_id", "zone_name"]
        assert first == second
        # insertion order is left alone
        assert _names(context.state.column_configs) == ["store_id", "zone_name", "cluster_name"]

    def test_column_choices_include_own_name(self, make_configured_context, editing_service):
        ctx = make_configured_context(n=2)  # store_id, zone_name

        choices = editing_service.column_choices(ctx, 0)  # store_id

        assert choices == sorted(["cluster_name", "location", "node_count", "store_id"])
        assert "zone_name" not in choices
        assert "store_id" not in ctx.state.available_columns

    def test_reset_restores_universe(self, make_configured_context, editing_service, universe):
        ctx = make_configured_context(n=3)

        editing_service.reset(ctx)

        assert ctx.state == ConfigState.initial(universe)


def test_random_edit_sequences_keep_partition(editing_service, universe):
    from validation_builder.core.models import ValidationContext

    rng = random.Random(1234)
    ctx = ValidationContext.from_universe(universe)
    for _ in range(300):
        op = rng.choice(["add", "remove", "rename"])
        size = len(ctx.state.column_configs)
        if op == "add":
            editing_service.add_column(ctx)
        elif op == "remove":
            editing_service.remove_column(ctx, rng.randint(-1, size))
        else:
            editing_service.rename_column(ctx, rng.randint(0, max(0, size)), rng.choice(universe))
        _assert_partition(ctx)
        assert editing_service.check_consistency(ctx) == (True, "ok")
