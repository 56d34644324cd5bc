import pytest

from secret_santa.domain import ConstraintSet, Vertex
from secret_santa.services.constraints import ConstraintValidator

alice = Vertex("alice")
bob = Vertex("bob")
charlie = Vertex("charlie")
diana = Vertex("diana")


def make_validator():
    constraints = ConstraintSet.build(
        exclusions={"alice": ["bob"], "charlie": ["diana"]},
        cheats={"bob": "charlie"},
    )
    return ConstraintValidator(constraints)


def test_unconstrained_move_is_valid():
    assert make_validator().is_valid_move(alice, charlie)


def test_excluded_move_is_rejected():
    assert not make_validator().is_valid_move(alice, bob)


def test_forced_target_is_the_only_valid_move():
    validator = make_validator()
    assert validator.is_valid_move(bob, charlie)
    assert not validator.is_valid_move(bob, diana)


def test_exclusion_wins_over_forced_assignment():
    constraints = ConstraintSet.build(exclusions={"alice": ["bob"]}, cheats={"alice": "bob"})
    validator = ConstraintValidator(constraints)
    assert not validator.is_valid_move(alice, bob)
    assert not validator.is_valid_move(alice, charlie)


def test_missing_constraints_allow_everything():
    validator = ConstraintValidator()
    assert validator.is_valid_move(alice, bob)
    assert ConstraintValidator(ConstraintSet.build(None, None)).is_valid_move(bob, alice)


def test_filter_valid_targets():
    targets = make_validator().filter_valid_targets(alice, [bob, charlie, diana])
    assert targets == {charlie, diana}


def test_validate_complete_path_wraps_around():
    validator = make_validator()
    assert validator.validate_complete_path([alice, charlie])
    assert not validator.validate_complete_path([alice, bob])
    assert not validator.validate_complete_path([bob, alice])


def test_remaining_cheats_unsatisfiable_without_target():
    assert not make_validator().can_satisfy_remaining_cheats({bob, alice})


def test_remaining_cheats_satisfiable_with_target():
    assert make_validator().can_satisfy_remaining_cheats({bob, charlie, alice})
    assert make_validator().can_satisfy_remaining_cheats(set())


def test_forced_target_lookup():
    validator = make_validator()
    assert validator.forced_target(bob) == "charlie"
    assert validator.forced_target(alice) is None
    assert validator.has_forced_target(bob)
    assert not validator.has_forced_target(alice)
    assert validator.exclusions_for("alice") == frozenset({"bob"})
    assert validator.exclusions_for("bob") == frozenset()


def test_constraint_set_is_read_only_and_hashable():
    direct = ConstraintSet(exclusions={"alice": ["bob"]}, forced={"bob": "charlie"})
    built = ConstraintSet.build(exclusions={"alice": ["bob"]}, cheats={"bob": "charlie"})

    assert direct == built
    assert hash(built) == hash(ConstraintSet.build())
    assert direct.exclusions["alice"] == frozenset({"bob"})
    with pytest.raises(TypeError):
        direct.forced["alice"] = "diana"
