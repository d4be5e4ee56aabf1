"""Tests for glue.routing.binding — captures to operation parameters."""

from typing import Any

from glue.routing.binding import bind_arguments

GROUPS: dict[int | str, str | None] = {0: "/page/42", 1: "42", "id": "42"}


class TestBindArguments:
    def test_named_capture(self) -> None:
        def op(id: str) -> None: ...

        assert bind_arguments(op, GROUPS) == (["42"], {})

    def test_matches_receives_everything(self) -> None:
        def op(matches: dict[int | str, str | None]) -> None: ...

        args, _ = bind_arguments(op, GROUPS)
        assert args == [GROUPS]
        assert args[0] is GROUPS

    def test_unknown_name_is_none(self) -> None:
        def op(slug: str | None) -> None: ...

        assert bind_arguments(op, GROUPS) == ([None], {})

    def test_declared_order(self) -> None:
        def op(missing: Any, matches: Any, id: str) -> None: ...

        args, _ = bind_arguments(op, GROUPS)
        assert args == [None, GROUPS, "42"]

    def test_no_parameters(self) -> None:
        def op() -> None: ...

        assert bind_arguments(op, GROUPS) == ([], {})

    def test_positional_index_is_not_a_name(self) -> None:
        # Only named groups bind by name; index keys are reachable via matches.
        def op(one: Any) -> None: ...

        assert bind_arguments(op, GROUPS) == ([None], {})

    def test_keyword_only(self) -> None:
        def op(id: str, *, matches: Any) -> None: ...

        assert bind_arguments(op, GROUPS) == (["42"], {"matches": GROUPS})

    def test_var_args_skipped(self) -> None:
        def op(id: str, *args: Any, **kwargs: Any) -> None: ...

        assert bind_arguments(op, GROUPS) == (["42"], {})

    def test_bound_method_excludes_self(self) -> None:
        class Page:
            def GET(self, id: str) -> str:  # noqa: N802
                return id

        assert bind_arguments(Page().GET, GROUPS) == (["42"], {})
