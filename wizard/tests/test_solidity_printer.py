"""
Tests for Solidity contract printing
"""

from wizard.core.contract import SolidityContractBuilder
from wizard.core.models import Argument, BaseFunction, Component, Library, Lit, Note
from wizard.generators.solidity import (
    infer_transpiled,
    print_contract,
    upgradeable_name,
    upgradeable_path,
)

HEADER = (
    "// SPDX-License-Identifier: MIT\n"
    "// Compatible with OpenZeppelin Contracts ^5.4.0\n"
    "pragma solidity ^0.8.27;\n"
)

ERC20 = Component("ERC20", "@openzeppelin/contracts/token/ERC20/ERC20.sol")
OWNABLE = Component("Ownable", "@openzeppelin/contracts/access/Ownable.sol")
PAUSABLE = Component("ERC20Pausable", "@openzeppelin/contracts/token/ERC20/extensions/ERC20Pausable.sol")
INITIALIZABLE = Component(
    "Initializable", "@openzeppelin/contracts/proxy/utils/Initializable.sol", run_first=True
)

UPDATE = BaseFunction(
    "_update",
    kind="internal",
    args=[Argument("from", "address"), Argument("to", "address"), Argument("value", "uint256")],
)


def test_empty_contract_shell():
    """Test printing a contract with no members"""
    c = SolidityContractBuilder("MyContract")
    assert print_contract(c) == HEADER + (
        "\n"
        "contract MyContract {\n"
        "}\n"
    )


def test_parent_with_params():
    """Test parent constructor arguments"""
    c = SolidityContractBuilder("MyToken")
    c.add_parent(ERC20, ["MyToken", "MTK"])
    assert print_contract(c) == HEADER + (
        "\n"
        'import {ERC20} from "@openzeppelin/contracts/token/ERC20/ERC20.sol";\n'
        "\n"
        "contract MyToken is ERC20 {\n"
        '    constructor() ERC20("MyToken", "MTK") {}\n'
        "}\n"
    )


def test_long_constructor_heading_splits_modifiers():
    """Test wrapping of a long constructor heading"""
    c = SolidityContractBuilder("MyToken")
    c.add_parent(ERC20, ["MyToken", "MTK"])
    c.add_parent(OWNABLE, [Lit("initialOwner")])
    c.add_constructor_argument(Argument("initialOwner", "address"))
    c.add_constructor_argument(Argument("recipient", "address"))
    c.add_constructor_code("_mint(recipient, 1000 * 10 ** decimals());")
    source = print_contract(c)
    assert (
        "    constructor(address initialOwner, address recipient)\n"
        '        ERC20("MyToken", "MTK")\n'
        "        Ownable(initialOwner)\n"
        "    {\n"
        "        _mint(recipient, 1000 * 10 ** decimals());\n"
        "    }\n"
    ) in source


def test_single_override_is_omitted():
    """Test that single overrides are inherited as is"""
    c = SolidityContractBuilder("MyToken")
    c.add_parent(ERC20)
    c.add_override(ERC20, UPDATE)
    source = print_contract(c)
    assert "_update" not in source
    assert "overrides required" not in source


def test_multiple_overrides_printed_after_banner():
    """Test the overrides banner"""
    c = SolidityContractBuilder("MyToken")
    c.add_parent(ERC20)
    c.add_parent(PAUSABLE)
    c.add_override(ERC20, UPDATE)
    c.add_override(PAUSABLE, UPDATE)
    source = print_contract(c)
    assert (
        "    // The following functions are overrides required by Solidity.\n"
        "\n"
        "    function _update(address from, address to, uint256 value)\n"
        "        internal\n"
        "        override(ERC20, ERC20Pausable)\n"
        "    {\n"
        "        super._update(from, to, value);\n"
        "    }\n"
    ) in source


def test_function_order_code_then_modifiers_then_overrides():
    """Test function ordering"""
    c = SolidityContractBuilder("MyToken")
    c.add_parent(ERC20)
    c.add_parent(PAUSABLE)
    c.add_override(ERC20, UPDATE)
    c.add_override(PAUSABLE, UPDATE)

    guarded = BaseFunction("guarded", kind="public")
    c.add_modifier("onlyOwner", guarded)

    mint = BaseFunction("mint", kind="public", args=[Argument("to", "address"), Argument("amount", "uint256")])
    c.add_modifier("onlyOwner", mint)
    c.add_function_code("_mint(to, amount);", mint)

    source = print_contract(c)
    assert source.index("function mint") < source.index("function guarded") < source.index("function _update")
    assert "    function mint(address to, uint256 amount) public onlyOwner {\n" in source


def test_returning_override_calls_super_with_return():
    """Test returning super calls"""
    c = SolidityContractBuilder("MyToken")
    a = Component("ERC20Permit", "@openzeppelin/contracts/token/ERC20/extensions/ERC20Permit.sol")
    b = Component("Nonces", "@openzeppelin/contracts/utils/Nonces.sol")
    nonces = BaseFunction(
        "nonces", kind="public", args=[Argument("owner", "address")], returns="uint256", mutability="view"
    )
    c.add_parent(a)
    c.add_parent(b)
    c.add_override(a, nonces)
    c.add_override(b, nonces)
    source = print_contract(c)
    assert (
        "    function nonces(address owner)\n"
        "        public\n"
        "        view\n"
        "        override(ERC20Permit, Nonces)\n"
        "        returns (uint256)\n"
        "    {\n"
        "        return super.nonces(owner);\n"
        "    }\n"
    ) in source


def test_final_function_with_empty_body():
    """Test a finalized function without code"""
    c = SolidityContractBuilder("MyToken")
    uups = Component("UUPSUpgradeable", "@openzeppelin/contracts/proxy/utils/UUPSUpgradeable.sol")
    authorize = BaseFunction("_authorizeUpgrade", kind="internal", args=[Argument("newImplementation", "address")])
    c.add_parent(uups)
    c.add_override(uups, authorize)
    c.add_modifier("onlyOwner", authorize)
    c.set_function_body([], authorize)
    source = print_contract(c)
    assert (
        "    function _authorizeUpgrade(address newImplementation)\n"
        "        internal\n"
        "        override\n"
        "        onlyOwner\n"
        "    {}\n"
    ) in source


def test_function_comments():
    """Test comments above a function"""
    c = SolidityContractBuilder("MyToken")
    fn = BaseFunction("pause", kind="public")
    c.add_function_comment("// Stops all transfers", fn)
    c.add_function_code("_pause();", fn)
    assert "    // Stops all transfers\n    function pause() public {\n        _pause();\n    }\n" in print_contract(c)


def test_variables_and_libraries():
    """Test state variables and using-for declarations"""
    c = SolidityContractBuilder("MyToken")
    c.add_library(Library("Strings", "@openzeppelin/contracts/utils/Strings.sol"), ["uint256"])
    c.add_variable('bytes32 public constant MINTER_ROLE = keccak256("MINTER_ROLE");')
    c.add_variable('bytes32 public constant PAUSER_ROLE = keccak256("PAUSER_ROLE");')
    source = print_contract(c)
    assert (
        "contract MyToken {\n"
        "    using Strings for uint256;\n"
        "\n"
        '    bytes32 public constant MINTER_ROLE = keccak256("MINTER_ROLE");\n'
        '    bytes32 public constant PAUSER_ROLE = keccak256("PAUSER_ROLE");\n'
        "}\n"
    ) in source


def test_natspec_before_contract():
    """Test NatSpec tags above the contract"""
    c = SolidityContractBuilder("MyToken")
    c.add_natspec_tag("@custom:security-contact", "sec@example.com")
    assert "/// @custom:security-contact sec@example.com\ncontract MyToken {\n" in print_contract(c)


def test_note_values_keep_comment():
    """Test argument notes printed as comments"""
    c = SolidityContractBuilder("MyGovernor")
    settings = Component("GovernorSettings", "@openzeppelin/contracts/governance/extensions/GovernorSettings.sol")
    c.add_parent(settings, [Note(7200, "1 day"), Note(50400, "1 week"), 0])
    assert "GovernorSettings(7200 /* 1 day */, 50400 /* 1 week */, 0)" in print_contract(c)


def test_upgradeable_without_initializer_parents():
    """Test upgradeable contracts with no initializers"""
    c = SolidityContractBuilder("MyContract")
    c.upgradeable = True
    c.add_component(INITIALIZABLE, initializable=False)
    source = print_contract(c)
    assert "contract MyContract is Initializable {\n" in source
    assert (
        "    /// @custom:oz-upgrades-unsafe-allow constructor\n"
        "    constructor() {\n"
        "        _disableInitializers();\n"
        "    }\n"
    ) in source
    assert "function initialize" not in source
    assert 'import {Initializable} from "@openzeppelin/contracts-upgradeable/proxy/utils/Initializable.sol";' in source


def test_upgradeable_initialize_function():
    """Test the initialize function of upgradeable contracts"""
    c = SolidityContractBuilder("MyToken")
    c.upgradeable = True
    c.add_parent(ERC20, ["MyToken", "MTK"])
    c.add_component(INITIALIZABLE, initializable=False)
    c.add_parent(OWNABLE, [Lit("initialOwner")])
    c.add_constructor_argument(Argument("initialOwner", "address"))
    source = print_contract(c)

    assert "contract MyToken is Initializable, ERC20Upgradeable, OwnableUpgradeable {\n" in source
    assert 'import {ERC20Upgradeable} from "@openzeppelin/contracts-upgradeable/token/ERC20/ERC20Upgradeable.sol";' in source
    assert 'import {OwnableUpgradeable} from "@openzeppelin/contracts-upgradeable/access/OwnableUpgradeable.sol";' in source
    assert (
        "    /// @custom:oz-upgrades-unsafe-allow constructor\n"
        "    constructor() {\n"
        "        _disableInitializers();\n"
        "    }\n"
        "\n"
        "    function initialize(address initialOwner) public initializer {\n"
        '        __ERC20_init("MyToken", "MTK");\n'
        "        __Ownable_init(initialOwner);\n"
        "    }\n"
    ) in source


def test_upgradeable_with_non_transpiled_parent():
    """Test parents kept out of the upgradeable transform"""
    c = SolidityContractBuilder("MyToken")
    c.upgradeable = True
    c.add_component(INITIALIZABLE, initializable=False)
    iface = Component("IThing", "@openzeppelin/contracts/interfaces/IThing.sol")
    c.add_parent(iface, [Lit("thing")])
    source = print_contract(c)
    assert "/// @custom:oz-upgrades-unsafe-allow-reachable constructor" in source
    assert "    constructor() IThing(thing) {\n" in source
    assert "function initialize" not in source
    assert 'import {IThing} from "@openzeppelin/contracts/interfaces/IThing.sol";' in source


def test_libraries_are_not_transformed():
    """Test that libraries keep their names"""
    c = SolidityContractBuilder("MyToken")
    c.upgradeable = True
    c.add_library(Library("Strings", "@openzeppelin/contracts/utils/Strings.sol"), ["uint256"])
    source = print_contract(c)
    assert 'import {Strings} from "@openzeppelin/contracts/utils/Strings.sol";' in source


def test_printing_is_deterministic():
    """Test that printing twice gives the same source"""
    c = SolidityContractBuilder("MyToken")
    c.add_parent(ERC20, ["MyToken", "MTK"])
    c.add_parent(PAUSABLE)
    c.add_override(ERC20, UPDATE)
    c.add_override(PAUSABLE, UPDATE)
    assert print_contract(c) == print_contract(c.freeze())


def test_infer_transpiled():
    """Test detection of transpiled parents"""
    assert infer_transpiled("ERC20") is True
    assert infer_transpiled("IERC20") is False
    assert infer_transpiled("Thing", "@openzeppelin/contracts/interfaces/IThing.sol") is False
    assert infer_transpiled("Thing", "@openzeppelin/contracts/interfaces/draft-IThing.sol") is False
    assert infer_transpiled("IERC20", transpiled=True) is True


def test_upgradeable_names():
    """Test upgradeable names and paths"""
    assert upgradeable_name("ERC20") == "ERC20Upgradeable"
    assert upgradeable_name("UUPSUpgradeable") == "UUPSUpgradeable"
    assert upgradeable_name("Initializable") == "Initializable"
    assert upgradeable_name("ERC20.sol") == "ERC20Upgradeable.sol"
    assert upgradeable_path("@openzeppelin/contracts/access/Ownable.sol") == (
        "@openzeppelin/contracts-upgradeable/access/OwnableUpgradeable.sol"
    )
