"""Tests for recipe simulation."""

from brewstep.core import StepTable, simulate_recipe
from brewstep.models import CompletionAction
from conftest import make_step


class TestSimulateRecipe:
    """Tests for simulate_recipe."""

    def test_aeropress_finishes(self, aeropress_table: StepTable) -> None:
        """The packaged recipe runs to its last step in 105 ticks."""
        result = simulate_recipe(aeropress_table)
        assert result.finished is True
        assert result.stalled_at is None
        assert result.ticks == 105

    def test_aeropress_timeline(self, aeropress_table: StepTable) -> None:
        """Timed steps appear exactly at their thresholds."""
        result = simulate_recipe(aeropress_table)
        timed = [(e.elapsed_seconds, e.step_index) for e in result.events if e.trigger == "timer"]
        assert timed == [(15, 3), (60, 4), (80, 5), (90, 6), (105, 7)]

    def test_event_order(self, aeropress_table: StepTable) -> None:
        """User steps come first, then the timer start, then timed steps."""
        triggers = [e.trigger for e in simulate_recipe(aeropress_table).events]
        assert triggers[:4] == ["begin", "user", "user", "start_timer"]
        assert set(triggers[4:]) == {"timer"}

    def test_untimed_recipe(self) -> None:
        """A recipe without a timer finishes with zero ticks."""
        table = StepTable.of(
            [make_step(0, "Boil"), make_step(0, "Pour", CompletionAction.FINISH)]
        )
        result = simulate_recipe(table)
        assert result.finished is True
        assert result.ticks == 0

    def test_stall_on_unreachable_threshold(self) -> None:
        """A 0s step after the timer step is never reached by the clock."""
        table = StepTable.of(
            [
                make_step(0, "Start", CompletionAction.START_TIMER),
                make_step(0, "Unreachable"),
                make_step(5, "Done", CompletionAction.FINISH),
            ]
        )
        result = simulate_recipe(table)
        assert result.finished is False
        assert result.stalled_at == 0
        assert result.ticks == 6

    def test_stall_on_mid_recipe_finish(self) -> None:
        """A finish action before the last step leaves nothing to do."""
        table = StepTable.of(
            [make_step(0, "Stop here", CompletionAction.FINISH), make_step(0, "Never")]
        )
        result = simulate_recipe(table)
        assert result.finished is False
        assert result.stalled_at == 0

    def test_max_ticks_budget(self, aeropress_table: StepTable) -> None:
        """A small tick budget reports a stall where the clock was waiting."""
        result = simulate_recipe(aeropress_table, max_ticks=20)
        assert result.finished is False
        assert result.ticks == 20
        assert result.stalled_at == 3
