import pytest

from abrigo import engine, rules
from abrigo.exceptions import ErrorKind
from abrigo.state import Destination, Reason


def test_subsequence_match_goes_to_single_eligible_adopter():
    result = engine.evaluate_adoptions("RATO,BOLA", "RATO,NOVELO", "Rex,Fofo")

    assert result.ok
    assert result.lines == ("Fofo - abrigo", "Rex - pessoa 1")
    assert result.to_dict() == {"lista": ["Fofo - abrigo", "Rex - pessoa 1"]}


def test_unknown_animal_is_rejected():
    result = engine.evaluate_adoptions("CAIXA,RATO", "RATO,BOLA", "Lulu")

    assert result.error is ErrorKind.INVALID_ANIMAL
    assert result.lines == ()
    assert result.to_dict() == {"erro": "Animal inválido"}


def test_repeated_toy_is_rejected():
    result = engine.evaluate_adoptions("RATO,RATO", "RATO,NOVELO", "Rex")
    assert result.to_dict() == {"erro": "Brinquedo inválido"}

    result = engine.evaluate_adoptions("RATO,BOLA", "NOVELO,NOVELO", "Rex")
    assert result.error is ErrorKind.INVALID_TOY


def test_unknown_toy_is_rejected():
    assert engine.evaluate_adoptions("RATO,PENA", "", "Rex").error is ErrorKind.INVALID_TOY
    # Toy tokens are case-sensitive.
    assert engine.evaluate_adoptions("rato", "", "Rex").error is ErrorKind.INVALID_TOY


def test_repeated_animal_is_rejected():
    result = engine.evaluate_adoptions("RATO,BOLA", "", "Rex,Fofo,Rex")
    assert result.error is ErrorKind.INVALID_ANIMAL


def test_toy_errors_are_reported_before_animal_errors():
    result = engine.evaluate_adoptions("RATO,RATO", "", "Lulu")
    assert result.error is ErrorKind.INVALID_TOY


def test_both_adopters_eligible_sends_animal_to_shelter():
    result = engine.evaluate_adoptions_with_trace("RATO,BOLA", "RATO,BOLA", "Zero")

    assert result.lines == ("Zero - abrigo",)
    (decision,) = result.trace
    assert decision.eligible == (rules.ADOPTER_1, rules.ADOPTER_2)
    assert decision.reason is Reason.TIE


def test_second_cat_for_same_adopter_stays_in_shelter():
    result = engine.evaluate_adoptions_with_trace("BOLA,RATO,LASER", "", "Mimi,Fofo")

    assert result.lines == ("Fofo - abrigo", "Mimi - pessoa 1")
    assert [d.reason for d in result.trace] == [Reason.ADOPTED, Reason.SPECIES_QUOTA]

    reversed_order = engine.evaluate_adoptions("BOLA,RATO,LASER", "", "Fofo,Mimi")
    assert reversed_order.lines == ("Fofo - pessoa 1", "Mimi - abrigo")


def test_fourth_animal_for_same_adopter_stays_in_shelter():
    result = engine.evaluate_adoptions_with_trace(
        "LASER,RATO,BOLA,CAIXA,NOVELO", "", "Rex,Bola,Bebe,Zero"
    )

    assert result.lines == (
        "Bebe - pessoa 1",
        "Bola - pessoa 1",
        "Rex - pessoa 1",
        "Zero - abrigo",
    )
    assert result.trace[-1].reason is Reason.TOTAL_QUOTA


def test_special_animal_kept_when_adopter_has_companion():
    result = engine.evaluate_adoptions("SKATE,RATO,BOLA", "LASER", "Rex,Loco")
    assert result.lines == ("Loco - pessoa 1", "Rex - pessoa 1")


def test_companion_processed_after_special_animal_still_counts():
    # Companionship is checked after the whole pass, not when Loco is placed,
    # so Rex arriving later in the order keeps Loco with adopter 1.
    result = engine.evaluate_adoptions_with_trace("SKATE,RATO,BOLA", "LASER", "Loco,Rex")

    assert result.lines == ("Loco - pessoa 1", "Rex - pessoa 1")
    assert all(d.reason is Reason.ADOPTED for d in result.trace)


def test_special_animal_without_companion_returns_to_shelter():
    result = engine.evaluate_adoptions_with_trace("SKATE,RATO", "", "Loco")

    assert result.lines == ("Loco - abrigo",)
    assert [d.reason for d in result.trace] == [Reason.ADOPTED, Reason.NO_COMPANION]
    assert result.trace[-1].destination is Destination.SHELTER


def test_special_animal_uses_all_toys_rule_in_any_order():
    result = engine.evaluate_adoptions("RATO,SKATE,CAIXA,NOVELO", "", "Loco,Bola")
    assert result.lines == ("Bola - pessoa 1", "Loco - pessoa 1")


def test_special_animal_with_second_adopter():
    result = engine.evaluate_adoptions("RATO,BOLA", "SKATE,RATO,CAIXA,NOVELO", "Loco,Bola")
    assert result.lines == ("Bola - pessoa 2", "Loco - pessoa 2")


def test_revocation_leaves_other_placements_untouched():
    result = engine.evaluate_adoptions("SKATE,RATO", "RATO,BOLA", "Loco,Rex")
    assert result.lines == ("Loco - abrigo", "Rex - pessoa 2")


def test_whitespace_and_empty_tokens_are_ignored():
    result = engine.evaluate_adoptions(" RATO , BOLA ,", "", " Rex ")
    assert result.lines == ("Rex - pessoa 1",)


def test_non_string_inputs_are_treated_as_empty():
    result = engine.evaluate_adoptions(None, 42, "Rex")
    assert result.lines == ("Rex - abrigo",)

    empty = engine.evaluate_adoptions("RATO", "BOLA", None)
    assert empty.ok
    assert empty.lines == ()


def test_plain_evaluation_does_not_keep_trace():
    result = engine.evaluate_adoptions("RATO,BOLA", "", "Rex")
    assert result.trace == ()


def test_unexpected_failure_is_reported_as_invalid_toy(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(engine, "allocate_with_trace", boom)

    result = engine.evaluate_adoptions("RATO,BOLA", "", "Rex")
    assert result.error is ErrorKind.INVALID_TOY
    assert result.lines == ()


class TestAllocationPass:
    """Allocation and reconciliation driven directly with tokenized inputs."""

    def test_counters_follow_placements(self):
        inventories = {1: ("BOLA", "RATO", "LASER"), 2: ("CAIXA", "NOVELO")}
        placement, states = engine.allocate(inventories, ["Mimi", "Bola", "Fofo"])

        assert placement == {
            "Mimi": Destination.ADOPTER_1,
            "Bola": Destination.ADOPTER_2,
            "Fofo": Destination.SHELTER,
        }
        assert states[1].total_adopted == 1
        assert states[1].quota_limited_count == 1
        assert states[2].total_adopted == 1
        assert states[2].quota_limited_count == 0

    def test_rejected_animals_leave_state_unchanged(self):
        inventories = {1: ("RATO", "BOLA"), 2: ("RATO", "BOLA")}
        placement, states = engine.allocate(inventories, ["Rex", "Zero"])

        assert set(placement.values()) == {Destination.SHELTER}
        assert states[1].total_adopted == 0
        assert states[2].total_adopted == 0

    def test_reconciliation_rolls_back_total(self):
        inventories = {1: ("SKATE", "RATO"), 2: ()}
        placement, states = engine.allocate(inventories, ["Loco"])
        assert placement["Loco"] is Destination.ADOPTER_1
        assert states[1].total_adopted == 1

        decision = engine.reconcile_companionship(inventories, placement, states)

        assert decision is not None
        assert decision.reason is Reason.NO_COMPANION
        assert placement["Loco"] is Destination.SHELTER
        assert states[1].total_adopted == 0
        assert states[1].quota_limited_count == 0

    @pytest.mark.parametrize("order", [["Rex"], ["Loco"]])
    def test_reconciliation_ignores_shelter_and_absent_special_animal(self, order):
        inventories = {1: ("RATO", "BOLA"), 2: ()}
        placement, states = engine.allocate(inventories, order)
        before = dict(placement)

        assert engine.reconcile_companionship(inventories, placement, states) is None
        assert placement == before

    def test_evaluate_raises_on_tokenized_validation_errors(self):
        from abrigo.exceptions import InvalidAnimalError, InvalidToyError

        with pytest.raises(InvalidToyError, match="repeated toy RATO"):
            engine.evaluate(["RATO", "RATO"], [], ["Rex"])
        with pytest.raises(InvalidAnimalError, match="unknown animal Lulu"):
            engine.evaluate(["RATO"], [], ["Lulu"])
