"""Built-in registry of the FHEVM examples shipped with this repository."""

from __future__ import annotations

from examplegen.registry.models import (
    CategoryDescriptor,
    CategoryItem,
    DocEntry,
    ExampleDescriptor,
    Registry,
)

EXAMPLES: list[ExampleDescriptor] = [
    ExampleDescriptor(
        id="fhe-counter",
        source_path="contracts/basic/FHECounter.sol",
        test_path="test/FHECounter.ts",
        description="A simple FHE counter demonstrating basic encrypted operations",
    ),
    ExampleDescriptor(
        id="encrypt-single-value",
        source_path="contracts/basic/encrypt/EncryptSingleValue.sol",
        test_path="test/basic/encrypt/EncryptSingleValue.ts",
        description="Demonstrates FHE encryption mechanism and common pitfalls",
    ),
    ExampleDescriptor(
        id="encrypt-multiple-values",
        source_path="contracts/basic/encrypt/EncryptMultipleValues.sol",
        test_path="test/basic/encrypt/EncryptMultipleValues.ts",
        description="Shows how to encrypt and handle multiple values",
    ),
    ExampleDescriptor(
        id="user-decrypt-single-value",
        source_path="contracts/basic/decrypt/UserDecryptSingleValue.sol",
        test_path="test/basic/decrypt/UserDecryptSingleValue.ts",
        description="Demonstrates user decryption and permission requirements",
    ),
    ExampleDescriptor(
        id="user-decrypt-multiple-values",
        source_path="contracts/basic/decrypt/UserDecryptMultipleValues.sol",
        test_path="test/basic/decrypt/UserDecryptMultipleValues.ts",
        description="Shows how to decrypt multiple encrypted values",
    ),
    ExampleDescriptor(
        id="public-decrypt-single-value",
        source_path="contracts/basic/decrypt/PublicDecryptSingleValue.sol",
        test_path="test/basic/decrypt/PublicDecryptSingleValue.ts",
        description="Demonstrates public decryption mechanism",
    ),
    ExampleDescriptor(
        id="public-decrypt-multiple-values",
        source_path="contracts/basic/decrypt/PublicDecryptMultipleValues.sol",
        test_path="test/basic/decrypt/PublicDecryptMultipleValues.ts",
        description="Shows public decryption with multiple values",
    ),
    ExampleDescriptor(
        id="fhe-add",
        source_path="contracts/basic/fhe-operations/FHEAdd.sol",
        test_path="test/basic/fhe-operators/FHEAdd.ts",
        description="Demonstrates FHE addition operations",
    ),
    ExampleDescriptor(
        id="fhe-if-then-else",
        source_path="contracts/basic/fhe-operations/FHEIfThenElse.sol",
        test_path="test/basic/fhe-operators/FHEIfThenElse.ts",
        description="Shows conditional operations on encrypted values",
    ),
    ExampleDescriptor(
        id="blind-auction",
        source_path="contracts/auctions/BlindAuction.sol",
        test_path="test/blindAuction/BlindAuction.ts",
        fixture_path="test/blindAuction/BlindAuction.fixture.ts",
        description="Sealed-bid auction with confidential bids",
    ),
    ExampleDescriptor(
        id="confidential-dutch-auction",
        source_path="contracts/auctions/ConfidentialDutchAuction.sol",
        test_path="test/confidentialDutchAuction/ConfidentialDutchAuction.ts",
        description="Dutch auction with encrypted prices",
    ),
    ExampleDescriptor(
        id="erc7984-example",
        source_path="contracts/openzeppelin-confidential-contracts/ERC7984Example.sol",
        test_path="test/openzeppelin-confidential-contracts/confidentialToken/confToken.test.ts",
        fixture_path="test/openzeppelin-confidential-contracts/confidentialToken/confToken.fixture.ts",
        description="ERC7984 confidential token standard implementation",
    ),
]

_OZ = "contracts/openzeppelin-confidential-contracts"
_OZ_WRAPPER_TEST = "test/openzeppelin-confidential-contracts/ERC7984Wrapper.test.ts"

CATEGORIES: list[CategoryDescriptor] = [
    CategoryDescriptor(
        id="basic",
        name="Basic FHEVM Examples",
        description=(
            "Fundamental FHEVM operations including encryption, decryption, "
            "and basic FHE operations"
        ),
        examples=tuple(
            CategoryItem(source_path=e.source_path, test_path=e.test_path)
            for e in EXAMPLES[:9]
        ),
    ),
    CategoryDescriptor(
        id="auctions",
        name="Auction Examples",
        description="Advanced auction implementations using confidential bids and prices",
        examples=(
            CategoryItem(
                source_path="contracts/auctions/BlindAuction.sol",
                test_path="test/blindAuction/BlindAuction.ts",
                fixture_path="test/blindAuction/BlindAuction.fixture.ts",
            ),
            CategoryItem(
                source_path="contracts/auctions/ConfidentialDutchAuction.sol",
                test_path="test/confidentialDutchAuction/ConfidentialDutchAuction.ts",
            ),
        ),
    ),
    CategoryDescriptor(
        id="openzeppelin",
        name="OpenZeppelin Confidential Contracts",
        description=(
            "ERC7984 and confidential token implementations using OpenZeppelin library"
        ),
        examples=(
            CategoryItem(
                source_path=f"{_OZ}/ERC7984Example.sol",
                test_path="test/openzeppelin-confidential-contracts/confidentialToken/confToken.test.ts",
                fixture_path="test/openzeppelin-confidential-contracts/confidentialToken/confToken.fixture.ts",
            ),
            CategoryItem(source_path=f"{_OZ}/ERC7984ERC20WrapperMock.sol", test_path=_OZ_WRAPPER_TEST),
            CategoryItem(source_path=f"{_OZ}/SwapERC7984ToERC20.sol", test_path=_OZ_WRAPPER_TEST),
            CategoryItem(source_path=f"{_OZ}/SwapERC7984ToERC7984.sol", test_path=_OZ_WRAPPER_TEST),
        ),
        extra_dependencies={"@openzeppelin/confidential-contracts": "^0.1.0"},
    ),
    CategoryDescriptor(
        id="games",
        name="Game Examples",
        description="Privacy-preserving game implementations using FHEVM",
        examples=(
            CategoryItem(
                source_path="contracts/fheWordle/FHEWordle.sol",
                test_path="test/fheWordle/FHEwordle.ts",
                fixture_path="test/fheWordle/FHEwordle.fixture.ts",
                auxiliary_paths=(
                    "test/fheWordle/validWordsList.ts",
                    "test/fheWordle/wordslist.ts",
                ),
            ),
            CategoryItem(
                source_path="contracts/fheWordle/FHEWordleFactory.sol",
                test_path="test/fheWordle/FHEwordle.ts",
            ),
        ),
    ),
]

DOCS: list[DocEntry] = [
    DocEntry(
        id="fhe-counter",
        title="FHE Counter",
        description=(
            "This example demonstrates how to build a confidential counter using "
            "FHEVM, in comparison to a simple counter."
        ),
        source_path="contracts/basic/FHECounter.sol",
        test_path="test/basic/FHECounter.ts",
        output_path="docs/fhe-counter.md",
        category="Basic",
    ),
    DocEntry(
        id="encrypt-single-value",
        title="Encrypt Single Value",
        description=(
            "This example demonstrates the FHE encryption mechanism and highlights "
            "a common pitfall developers may encounter."
        ),
        source_path="contracts/basic/encrypt/EncryptSingleValue.sol",
        test_path="test/basic/encrypt/EncryptSingleValue.ts",
        output_path="docs/fhe-encrypt-single-value.md",
        category="Basic - Encryption",
    ),
    DocEntry(
        id="encrypt-multiple-values",
        title="Encrypt Multiple Values",
        description=(
            "This example shows how to encrypt and handle multiple values in a "
            "single transaction."
        ),
        source_path="contracts/basic/encrypt/EncryptMultipleValues.sol",
        test_path="test/basic/encrypt/EncryptMultipleValues.ts",
        output_path="docs/fhe-encrypt-multiple-values.md",
        category="Basic - Encryption",
    ),
    DocEntry(
        id="user-decrypt-single-value",
        title="User Decrypt Single Value",
        description=(
            "This example demonstrates the FHE user decryption mechanism and "
            "highlights common pitfalls developers may encounter."
        ),
        source_path="contracts/basic/decrypt/UserDecryptSingleValue.sol",
        test_path="test/basic/decrypt/UserDecryptSingleValue.ts",
        output_path="docs/fhe-user-decrypt-single-value.md",
        category="Basic - Decryption",
    ),
    DocEntry(
        id="user-decrypt-multiple-values",
        title="User Decrypt Multiple Values",
        description="This example shows how to decrypt multiple encrypted values for a user.",
        source_path="contracts/basic/decrypt/UserDecryptMultipleValues.sol",
        test_path="test/basic/decrypt/UserDecryptMultipleValues.ts",
        output_path="docs/fhe-user-decrypt-multiple-values.md",
        category="Basic - Decryption",
    ),
    DocEntry(
        id="fhe-add",
        title="FHE Add Operation",
        description=(
            "This example demonstrates how to perform addition operations on "
            "encrypted values."
        ),
        source_path="contracts/basic/fhe-operations/FHEAdd.sol",
        test_path="test/basic/fhe-operations/FHEAdd.ts",
        output_path="docs/fheadd.md",
        category="Basic - FHE Operations",
    ),
    DocEntry(
        id="fhe-if-then-else",
        title="FHE If-Then-Else",
        description="This example shows conditional operations on encrypted values using FHE.",
        source_path="contracts/basic/fhe-operations/FHEIfThenElse.sol",
        test_path="test/basic/fhe-operations/FHEIfThenElse.ts",
        output_path="docs/fheifthenelse.md",
        category="Basic - FHE Operations",
    ),
]


def default_registry() -> Registry:
    """Return the registry describing the examples in this repository."""
    return Registry.build(examples=EXAMPLES, categories=CATEGORIES, docs=DOCS)
