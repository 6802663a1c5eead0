"""
Tests for the contract builders
"""

import dataclasses

import pytest

from wizard.core.contract import (
    CairoContractBuilder,
    ContractBuilder,
    SolidityContractBuilder,
    max_mutability,
)
from wizard.core.errors import (
    ConflictingDefinition,
    DuplicateFinalizedFunction,
    EmptyIdentifier,
    IncompleteComponent,
    InvalidDocumentationKey,
)
from wizard.core.models import (
    Argument,
    BaseFunction,
    BaseImplementedTrait,
    Component,
    Event,
    Impl,
    Library,
    Lit,
    Substorage,
    Variable,
)

TRAIT = BaseImplementedTrait(name="ExternalImpl", of="ExternalTrait", per_item_tag="external(v0)")


def make_component(name="FooComponent", **kwargs):
    storage = name.replace("Component", "").lower()
    return Component(
        name=name,
        path=f"my::{storage}",
        substorage=Substorage(storage, f"{name}::Storage"),
        event=Event(f"{name.replace('Component', '')}Event", f"{name}::Event"),
        **kwargs,
    )


def test_name_is_sanitized():
    """Test contract name sanitization"""
    c = ContractBuilder("my token")
    assert c.name == "MyToken"


def test_empty_name_raises():
    """Test that an unusable name raises error"""
    with pytest.raises(EmptyIdentifier):
        ContractBuilder("!!!")


def test_add_component_reports_first_insertion():
    """Test that adding a component twice reports no change"""
    c = CairoContractBuilder("Test")
    unit = make_component()
    assert c.add_component(unit, [Lit("owner")]) is True
    assert c.add_component(unit, [Lit("other")]) is False

    [component] = c.components
    assert component.initializer.params == [Lit("owner")]


def test_add_component_registers_use_clause():
    """Test the use clause added with a component"""
    c = CairoContractBuilder("Test")
    c.add_component(make_component())
    assert [(u.container_path, u.name) for u in c.use_clauses] == [("my::foo", "FooComponent")]


def test_shared_catalog_impls_do_not_leak():
    """Impls appended in one builder never show up in another"""
    unit = make_component(impls=[Impl("BaseImpl", "FooComponent::BaseImpl<ContractState>")])

    first = CairoContractBuilder("First")
    first.add_impl_to_component(unit, Impl("ExtraImpl", "FooComponent::ExtraImpl<ContractState>"))
    second = CairoContractBuilder("Second")
    second.add_component(unit)

    assert [i.name for i in first.components[0].impls] == ["BaseImpl", "ExtraImpl"]
    assert [i.name for i in second.components[0].impls] == ["BaseImpl"]
    assert [i.name for i in unit.impls] == ["BaseImpl"]


def test_add_impl_is_idempotent():
    """Test that impls are added once"""
    c = CairoContractBuilder("Test")
    unit = make_component()
    impl = Impl("FooImpl", "FooComponent::FooImpl<ContractState>")
    c.add_impl_to_component(unit, impl)
    c.add_impl_to_component(unit, impl)
    assert len(c.components[0].impls) == 1


def test_non_initializable_component():
    """Test a component without initializer"""
    c = CairoContractBuilder("Test")
    c.add_component(make_component(), initializable=False)
    assert c.components[0].initializer is None


def test_run_first_components_go_to_front():
    """Test ordering of run-first components"""
    c = CairoContractBuilder("Test")
    c.add_component(make_component("AComponent"))
    c.add_component(make_component("BComponent", run_first=True))
    c.add_component(make_component("CComponent"))
    assert [u.name for u in c.components] == ["BComponent", "AComponent", "CComponent"]


def test_add_function_same_signature_returns_same_handle():
    """Test that equal signatures share one function"""
    c = CairoContractBuilder("Test")
    fn = BaseFunction("mint", args=[Argument("to", "ContractAddress")])
    first = c.add_function(TRAIT, fn)
    second = c.add_function(TRAIT, BaseFunction("mint", args=[Argument("to", "felt252")]))
    assert first is second
    assert first.tag == "external(v0)"
    assert len(c.implemented_traits[0].functions) == 1


def test_add_function_different_args_are_distinct():
    """Test that different arguments make distinct functions"""
    c = CairoContractBuilder("Test")
    a = c.add_function(TRAIT, BaseFunction("f", args=[Argument("x")]))
    b = c.add_function(TRAIT, BaseFunction("f", args=[Argument("y")]))
    assert a is not b


def test_add_function_argument_boundaries_are_kept():
    """Test that argument names are not joined into one key"""
    c = CairoContractBuilder("Test")
    a = c.add_function(TRAIT, BaseFunction("f", args=[Argument("ab"), Argument("c")]))
    b = c.add_function(TRAIT, BaseFunction("f", args=[Argument("a"), Argument("bc")]))
    assert a is not b
    assert len(c.implemented_traits[0].functions) == 2


def test_cairo_component_requires_storage_and_event():
    """Test that incomplete Cairo components raise error"""
    c = CairoContractBuilder("Test")
    with pytest.raises(IncompleteComponent) as exc:
        c.add_component(Component("XComponent", "p::q"))
    assert "substorage" in str(exc.value)

    with pytest.raises(IncompleteComponent) as exc:
        c.add_component(Component("XComponent", "p::q", substorage=Substorage("x", "XComponent::Storage")))
    assert "event" in str(exc.value)
    assert c.components == []


def test_function_templates_are_copied():
    """Test that templates are not mutated by builders"""
    c = CairoContractBuilder("Test")
    template = BaseFunction("pause", code=["self.pausable.pause()"])
    fn = c.add_function(TRAIT, template)
    fn.code.append("extra")
    assert template.code == ["self.pausable.pause()"]


def test_code_before_is_kept_separately():
    """Test guard code kept apart from the body"""
    c = CairoContractBuilder("Test")
    fn = BaseFunction("pause", code=["self.pausable.pause()"])
    c.add_function_code_before(TRAIT, fn, "self.ownable.assert_only_owner()")
    handle = c.add_function(TRAIT, fn)
    assert handle.code_before == ["self.ownable.assert_only_owner()"]
    assert handle.code == ["self.pausable.pause()"]


def test_finalized_function_rejects_more_code():
    """Test that finalized functions raise on more code"""
    c = ContractBuilder("Test")
    fn = BaseFunction("upgrade")
    c.finalize_function(TRAIT, fn, ["do_it()"])

    with pytest.raises(DuplicateFinalizedFunction):
        c.append_function_code(TRAIT, fn, "more()")
    with pytest.raises(DuplicateFinalizedFunction):
        c.add_function_code_before(TRAIT, fn, "check()")
    with pytest.raises(DuplicateFinalizedFunction):
        c.finalize_function(TRAIT, fn, [])


def test_finalize_after_code_raises():
    """Test that finalizing a function with code raises error"""
    c = ContractBuilder("Test")
    fn = BaseFunction("upgrade")
    c.append_function_code(TRAIT, fn, "first()")
    with pytest.raises(DuplicateFinalizedFunction) as exc:
        c.finalize_function(TRAIT, fn, ["second()"])
    assert "has additional code" in str(exc.value)


def test_constructor_arguments_deduplicated_by_name():
    """Test constructor argument deduplication"""
    c = ContractBuilder("Test")
    c.add_constructor_argument(Argument("owner", "ContractAddress"))
    c.add_constructor_argument(Argument("owner", "felt252"))
    assert c.constructor_args == [Argument("owner", "ContractAddress")]


def test_constructor_code_is_append_only():
    """Test constructor code order"""
    c = ContractBuilder("Test")
    c.add_constructor_code("a()")
    c.add_constructor_code("a()")
    assert c.constructor_code == ["a()", "a()"]


def test_use_clause_key_is_alias_or_name():
    """Test use clause keys"""
    c = ContractBuilder("Test")
    for _ in range(3):
        c.add_use_clause("starknet", "ContractAddress")
    c.add_use_clause("other", "ContractAddress")
    c.add_use_clause("other", "ContractAddress", alias="OtherAddress")
    assert [(u.container_path, u.key) for u in c.use_clauses] == [
        ("starknet", "ContractAddress"),
        ("other", "OtherAddress"),
    ]


def test_constant_redefinition():
    """Test that conflicting constants raise error"""
    c = ContractBuilder("Test")
    assert c.add_constant(Variable("DECIMALS", "u8", "18")) is True
    assert c.add_constant(Variable("DECIMALS", "u8", "18")) is False

    with pytest.raises(ConflictingDefinition):
        c.add_constant(Variable("DECIMALS", "u8", "6"))
    with pytest.raises(ConflictingDefinition):
        c.add_constant(Variable("DECIMALS", "u256", "18"))


def test_super_variable_adds_use_clause():
    """Test the use clause of a module-level constant"""
    c = CairoContractBuilder("Test")
    role = Variable("MINTER_ROLE", "felt252", 'selector!("MINTER_ROLE")')
    assert c.add_super_variable(role) is True
    assert c.add_super_variable(role) is False
    assert ("super", "MINTER_ROLE") in [(u.container_path, u.name) for u in c.use_clauses]

    with pytest.raises(ConflictingDefinition):
        c.add_super_variable(Variable("MINTER_ROLE", "felt252", "0"))


def test_super_variable_on_trait():
    """Test constants declared on a trait"""
    c = CairoContractBuilder("Test")
    variable = Variable("X", "u8", "1")
    assert c.add_super_variable_to_trait(TRAIT, variable) is True
    assert c.add_super_variable_to_trait(TRAIT, variable) is False
    assert c.implemented_traits[0].super_variables == [variable]


def test_documentation_key_validation():
    """Test that invalid documentation keys raise error"""
    c = ContractBuilder("Test")
    c.add_natspec_tag("@custom:security-contact", "sec@example.com")
    c.add_natspec_tag("author", "someone")
    with pytest.raises(InvalidDocumentationKey):
        c.add_natspec_tag("@custom:Bad Key", "x")
    with pytest.raises(InvalidDocumentationKey):
        c.add_natspec_tag("1abc", "x")


def test_interface_flags():
    """Test interface flags"""
    c = ContractBuilder("Test")
    assert not c.has_interface_flag("ISRC5")
    c.add_interface_flag("ISRC5")
    assert c.has_interface_flag("ISRC5")


def test_freeze_is_independent_snapshot():
    """Test that frozen contracts do not follow the builder"""
    c = CairoContractBuilder("Test")
    c.add_component(make_component(), [Lit("owner")])
    c.add_function(TRAIT, BaseFunction("f"))
    contract = c.freeze()

    c.add_component(make_component("BarComponent"))
    c.add_function(TRAIT, BaseFunction("g"))
    c.implemented_traits[0].functions[0].code.append("changed")

    assert [u.name for u in contract.components] == ["FooComponent"]
    assert [f.name for f in contract.implemented_traits[0].functions] == ["f"]
    assert contract.implemented_traits[0].functions[0].code == []
    with pytest.raises(dataclasses.FrozenInstanceError):
        contract.name = "Other"


def test_max_mutability():
    """Test mutability ordering"""
    assert max_mutability("pure", "view") == "view"
    assert max_mutability(None, "view") == "nonpayable"
    assert max_mutability("payable", "pure") == "payable"


def test_solidity_parent_promotion_from_import_only():
    """Test promoting an import-only parent"""
    c = SolidityContractBuilder("Test")
    ownable = Component("Ownable", "@openzeppelin/contracts/access/Ownable.sol")
    erc20 = Component("ERC20", "@openzeppelin/contracts/token/ERC20/ERC20.sol")

    c.add_import_only(ownable)
    c.add_parent(erc20)
    assert [p.name for p in c.parents] == ["ERC20"]

    assert c.add_parent(ownable, [Lit("initialOwner")]) is True
    assert [p.name for p in c.parents] == ["Ownable", "ERC20"]
    assert c.parents[0].initializer.params == [Lit("initialOwner")]


def test_solidity_overrides_and_modifiers():
    """Test recording overrides and modifiers"""
    c = SolidityContractBuilder("Test")
    a = Component("A", "a.sol")
    b = Component("B", "b.sol")
    fn = BaseFunction("_update", kind="internal", args=[Argument("value", "uint256")])

    c.add_override(a, fn)
    c.add_override(b, fn, mutability="view")
    c.add_override(a, fn)
    c.add_modifier("whenNotPaused", fn)
    c.add_modifier("whenNotPaused", fn)

    [handle] = c.functions
    assert handle.override == ["A", "B"]
    assert handle.modifiers == ["whenNotPaused"]
    # nonpayable is less restrictive than view
    assert handle.mutability == "nonpayable"


def test_solidity_function_code_raises_mutability():
    """Test that added code can raise mutability"""
    c = SolidityContractBuilder("Test")
    fn = BaseFunction("deposit", kind="public", mutability="view")
    c.add_function_code("x = 1;", fn, mutability="payable")
    assert c.get_function(fn).mutability == "payable"


def test_solidity_set_function_body_finalizes():
    """Test that setting a body finalizes the function"""
    c = SolidityContractBuilder("Test")
    fn = BaseFunction("_authorizeUpgrade", kind="internal", args=[Argument("newImplementation", "address")])
    c.set_function_body([], fn)
    assert c.get_function(fn).final is True
    with pytest.raises(DuplicateFinalizedFunction):
        c.add_function_code("x();", fn)


def test_solidity_variables_and_libraries():
    """Test state variables and libraries"""
    c = SolidityContractBuilder("Test")
    assert c.add_variable("uint256 public x;") is True
    assert c.add_variable("uint256 public x;") is False

    lib = Library("Strings", "@openzeppelin/contracts/utils/Strings.sol")
    c.add_library(lib, ["uint256"])
    c.add_library(lib, ["uint256", "address"])
    assert c.libraries[0].using_for == ["uint256", "address"]
    assert lib.using_for == []
    assert "Strings" in [u.name for u in c.use_clauses]
