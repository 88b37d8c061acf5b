from pytest_archon import archrule


def test_history_does_not_reenter_composition() -> None:
    """
    The recorder replays actions straight onto the set it is bound to.
    It must never import the recording composition, or undo could record itself.
    """
    (
        archrule("history_is_one_way")
        .match("undoable_set.history*")
        .should_not_import("undoable_set.undoable")
        .check("undoable_set")
    )


def test_domain_isolation() -> None:
    """
    Domain layer should be self-contained.
    It must not import from history, ports, or the composition.
    """
    (
        archrule("domain_isolation")
        .match("undoable_set.domain*")
        .should_not_import("undoable_set.history*")
        .should_not_import("undoable_set.ports*")
        .should_not_import("undoable_set.undoable")
        .check("undoable_set")
    )


def test_ports_layering() -> None:
    """
    Ports (interfaces) should not depend on their implementations.
    """
    (
        archrule("ports_layering")
        .match("undoable_set.ports*")
        .should_not_import("undoable_set.history*")
        .should_not_import("undoable_set.undoable")
        .check("undoable_set")
    )


def test_exceptions_isolation() -> None:
    """
    Exceptions are the lowest level and import nothing from the package.
    """
    (
        archrule("exceptions_isolation")
        .match("undoable_set.exceptions")
        .should_not_import("undoable_set.domain*")
        .should_not_import("undoable_set.history*")
        .should_not_import("undoable_set.ports*")
        .should_not_import("undoable_set.undoable")
        .check("undoable_set")
    )
