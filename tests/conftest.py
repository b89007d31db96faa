"""Shared pytest fixtures for the examplegen test suite.

Provides reusable fixtures for:
- A synthetic repository root with contracts, tests and fixtures
- A synthetic base template (with build-artifact directories and a symlink)
- A synthetic registry and a Config pointing at the repository
"""

from __future__ import annotations

import json
import os
import textwrap
from pathlib import Path

import pytest

from examplegen.config import Config
from examplegen.registry import (
    CategoryDescriptor,
    CategoryItem,
    DocEntry,
    ExampleDescriptor,
    Registry,
)


# ---------------------------------------------------------------------------
# Source texts
# ---------------------------------------------------------------------------

COUNTER_SOL = textwrap.dedent("""\
    // SPDX-License-Identifier: BSD-3-Clause-Clear
    pragma solidity ^0.8.24;

    import {FHE, euint32, externalEuint32} from "@fhevm/solidity/lib/FHE.sol";
    import {ZamaEthereumConfig} from "@fhevm/solidity/config/ZamaConfig.sol";

    /**
     * A confidential counter built on encrypted integers.
     */
    contract FHECounter is ZamaEthereumConfig {
        euint32 private _count;

        function getCount() external view returns (euint32) {
            return _count;
        }
    }
""")

ADD_SOL = textwrap.dedent("""\
    // SPDX-License-Identifier: BSD-3-Clause-Clear
    pragma solidity ^0.8.24;

    /// @notice Adds two encrypted values
    contract FHEAdd {
        uint256 public result;
    }
""")

BLIND_AUCTION_SOL = textwrap.dedent("""\
    pragma solidity ^0.8.24;

    contract BlindAuction is ZamaEthereumConfig, ReentrancyGuard {
    }
""")

BLIND_FACTORY_SOL = textwrap.dedent("""\
    pragma solidity ^0.8.24;

    contract BlindAuctionFactory {
    }
""")

LIBRARY_ONLY_SOL = textwrap.dedent("""\
    pragma solidity ^0.8.24;

    library MathUtils {
    }
""")

TEMPLATE_MANIFEST = {
    "name": "fhevm-hardhat-template",
    "description": "Hardhat-based template for developing FHEVM Solidity smart contracts",
    "version": "0.1.0",
    "engines": {"node": ">=20", "npm": ">=7.0.0"},
    "license": "BSD-3-Clause-Clear",
    "homepage": "https://github.com/zama-ai/fhevm-hardhat-template",
    "keywords": ["fhevm", "zama"],
    "dependencies": {"encrypted-types": "^0.0.4", "@fhevm/solidity": "^0.9.1"},
    "devDependencies": {"hardhat": "^2.26.0"},
    "scripts": {"compile": "hardhat compile", "test": "hardhat test"},
}

TEMPLATE_TASK = textwrap.dedent("""\
    import { task } from "hardhat/config";

    task("task:address", "Prints the FHECounter address").setAction(async function (_args, hre) {
      const fheCounter = await hre.deployments.get("FHECounter");
      console.log("FHECounter address is " + fheCounter.address);
    });
""")


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Repository layout
# ---------------------------------------------------------------------------

@pytest.fixture
def template_dir(repo_root: Path) -> Path:
    """Base template directory inside the synthetic repository."""
    return repo_root / "fhevm-hardhat-template"


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """Synthetic repository with a template, contracts, tests and fixtures."""
    root = tmp_path / "repo"

    # -- Base template ----------------------------------------------------
    tpl = root / "fhevm-hardhat-template"
    _write(tpl / "package.json", json.dumps(TEMPLATE_MANIFEST, indent=2) + "\n")
    _write(tpl / "hardhat.config.ts", "export default {};\n")
    _write(tpl / "contracts" / "FHECounter.sol", COUNTER_SOL)
    _write(tpl / "contracts" / "interfaces" / "IKeep.sol", "interface IKeep {}\n")
    _write(tpl / "test" / "FHECounter.ts", "describe('FHECounter', () => {});\n")
    _write(tpl / "test" / "FHECounterSepolia.ts", "describe('sepolia', () => {});\n")
    _write(tpl / "test" / "README.md", "tests live here\n")
    _write(tpl / "test" / "helpers" / "signers.ts", "export {};\n")
    _write(tpl / "deploy" / "deploy.ts", "// template deploy script\n")
    _write(tpl / "tasks" / "FHECounter.ts", TEMPLATE_TASK)
    _write(tpl / "tasks" / "accounts.ts", "// generic accounts task\n")
    script = _write(tpl / "scripts" / "setup.sh", "#!/bin/sh\necho setup\n")
    script.chmod(0o755)
    os.symlink("hardhat.config.ts", tpl / "config-link.ts")
    for excluded in ("node_modules/pkg", "artifacts/build-info", "cache", "coverage", "types", "dist"):
        _write(tpl / excluded / "junk.txt", "build output\n")
    _write(tpl / "src" / "cache", "a file named like an excluded dir\n")

    # -- Example sources ----------------------------------------------------
    _write(root / "contracts" / "basic" / "FHECounter.sol", COUNTER_SOL)
    _write(root / "contracts" / "basic" / "FHEAdd.sol", ADD_SOL)
    _write(root / "contracts" / "auctions" / "BlindAuction.sol", BLIND_AUCTION_SOL)
    _write(root / "contracts" / "auctions" / "BlindAuctionFactory.sol", BLIND_FACTORY_SOL)
    _write(root / "contracts" / "lib" / "MathUtils.sol", LIBRARY_ONLY_SOL)

    _write(root / "test" / "FHECounter.ts", "describe('FHECounter example', () => {});\n")
    _write(root / "test" / "basic" / "FHEAdd.ts", "describe('FHEAdd', () => {});\n")
    _write(root / "test" / "blindAuction" / "BlindAuction.ts", "describe('BlindAuction', () => {});\n")
    _write(
        root / "test" / "blindAuction" / "BlindAuction.fixture.ts",
        "export async function deployFixture() {}\n",
    )
    _write(root / "test" / "blindAuction" / "bidders.ts", "export const bidders = [];\n")
    _write(root / "test" / "lib" / "MathUtils.ts", "describe('MathUtils', () => {});\n")
    return root


@pytest.fixture
def config(repo_root: Path) -> Config:
    """Config rooted at the synthetic repository."""
    return Config(root_dir=repo_root)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

@pytest.fixture
def registry() -> Registry:
    """Synthetic registry covering every scaffolding and docs path."""
    examples = [
        ExampleDescriptor(
            id="fhe-counter",
            source_path="contracts/basic/FHECounter.sol",
            test_path="test/FHECounter.ts",
            description="A simple FHE counter",
        ),
        ExampleDescriptor(
            id="fhe-add",
            source_path="contracts/basic/FHEAdd.sol",
            test_path="test/basic/FHEAdd.ts",
            description="FHE addition",
        ),
        ExampleDescriptor(
            id="blind-auction",
            source_path="contracts/auctions/BlindAuction.sol",
            test_path="test/blindAuction/BlindAuction.ts",
            fixture_path="test/blindAuction/BlindAuction.fixture.ts",
            auxiliary_paths=("test/blindAuction/bidders.ts",),
            description="Sealed-bid auction",
        ),
        ExampleDescriptor(
            id="missing-source",
            source_path="contracts/nope/Nope.sol",
            test_path="test/FHECounter.ts",
            description="Source file does not exist",
        ),
        ExampleDescriptor(
            id="missing-test",
            source_path="contracts/basic/FHEAdd.sol",
            test_path="test/nope/Nope.ts",
            description="Test file does not exist",
        ),
        ExampleDescriptor(
            id="library-only",
            source_path="contracts/lib/MathUtils.sol",
            test_path="test/lib/MathUtils.ts",
            description="No contract declaration",
        ),
    ]
    categories = [
        CategoryDescriptor(
            id="basic",
            name="Basic Examples",
            description="Counter and addition",
            examples=(
                CategoryItem(
                    source_path="contracts/basic/FHECounter.sol",
                    test_path="test/FHECounter.ts",
                ),
                CategoryItem(
                    source_path="contracts/basic/FHEAdd.sol",
                    test_path="test/basic/FHEAdd.ts",
                ),
            ),
        ),
        CategoryDescriptor(
            id="auctions",
            name="Auction Examples",
            description="Confidential auctions",
            examples=(
                CategoryItem(
                    source_path="contracts/auctions/BlindAuction.sol",
                    test_path="test/blindAuction/BlindAuction.ts",
                    fixture_path="test/blindAuction/BlindAuction.fixture.ts",
                    auxiliary_paths=("test/blindAuction/bidders.ts",),
                ),
                CategoryItem(
                    source_path="contracts/auctions/BlindAuctionFactory.sol",
                    test_path="test/blindAuction/BlindAuction.ts",
                    fixture_path="test/blindAuction/BlindAuction.fixture.ts",
                ),
            ),
            extra_dependencies={"@openzeppelin/confidential-contracts": "^0.1.0"},
        ),
        CategoryDescriptor(
            id="partial",
            name="Partially Missing",
            description="One good contract, one missing, one unnamed",
            examples=(
                CategoryItem(
                    source_path="contracts/nope/Nope.sol",
                    test_path="test/FHECounter.ts",
                ),
                CategoryItem(
                    source_path="contracts/lib/MathUtils.sol",
                    test_path="test/lib/MathUtils.ts",
                ),
                CategoryItem(
                    source_path="contracts/basic/FHEAdd.sol",
                    test_path="test/basic/FHEAdd.ts",
                ),
            ),
        ),
    ]
    docs = [
        DocEntry(
            id="fhe-counter",
            title="FHE Counter",
            description="A confidential counter.",
            source_path="contracts/basic/FHECounter.sol",
            test_path="test/FHECounter.ts",
            output_path="docs/fhe-counter.md",
            category="Basic",
        ),
        DocEntry(
            id="blind-auction",
            title="Blind Auction",
            description="",
            source_path="contracts/auctions/BlindAuction.sol",
            test_path="test/blindAuction/BlindAuction.ts",
            output_path="docs/blind-auction.md",
            category="Advanced",
        ),
        DocEntry(
            id="fhe-add",
            title="FHE Add",
            description="",
            source_path="contracts/basic/FHEAdd.sol",
            test_path="test/basic/FHEAdd.ts",
            output_path="docs/fheadd.md",
            category="Basic",
        ),
        DocEntry(
            id="missing",
            title="Missing Source",
            description="",
            source_path="contracts/nope/Nope.sol",
            test_path="test/FHECounter.ts",
            output_path="docs/missing.md",
            category="Advanced",
        ),
    ]
    return Registry.build(examples=examples, categories=categories, docs=docs)
