from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from pricemerge.adapters.feed import PriceFeedError
from pricemerge.config import MergeConfig, SplitIdentity
from pricemerge.domain.reconciliation import MergeResult
from pricemerge.ui import cli

if TYPE_CHECKING:
    from pricemerge.domain.catalog_sync import CatalogMergeResult


@pytest.fixture(autouse=True)
def clear_merge_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PRICEMERGE_SPLIT_IDENTITY", raising=False)
    monkeypatch.delenv("PRICEMERGE_VALIDATE", raising=False)


def test_union_command_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_union(current: Path, new: Path, **kwargs: object) -> MergeResult:
        captured.update(current=current, new=new, **kwargs)
        return MergeResult(prices=[])

    monkeypatch.setattr(cli, "union_price_files", fake_union)

    cli.main(["union", "current.json", "new.csv"])

    assert captured["current"] == Path("current.json")
    assert captured["new"] == Path("new.csv")
    assert captured["output_path"] is None
    assert captured["config"] == MergeConfig()


def test_merge_command_with_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_merge(feed: Path, **kwargs: object) -> CatalogMergeResult | None:
        captured.update(feed=feed, **kwargs)
        return None

    monkeypatch.setattr(cli, "merge_price_feed", fake_merge)

    cli.main(["--verbose", "merge", "feed.json", "--split-identity", "fresh", "--no-validate"])

    assert captured["feed"] == Path("feed.json")
    assert captured["config"] == MergeConfig(split_identity=SplitIdentity.FRESH, validate=False)


def test_export_command_collects_products(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_export(output: Path, **kwargs: object) -> int:
        captured.update(output=output, **kwargs)
        return 0

    monkeypatch.setattr(cli, "export_prices", fake_export)

    cli.main(["export", "--output", "out.csv", "--product", "A", "--product", "B"])

    assert captured["output"] == Path("out.csv")
    assert captured["product_codes"] == ["A", "B"]


def test_feed_errors_exit_with_usage_code(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_union(*_: object, **__: object) -> MergeResult:
        raise PriceFeedError("broken feed")

    monkeypatch.setattr(cli, "union_price_files", fake_union)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["union", "current.json", "new.json"])

    assert excinfo.value.code == 2


def test_invalid_split_identity_env_exits_with_usage_code(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("PRICEMERGE_SPLIT_IDENTITY", "random")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["merge", "feed.json"])

    assert excinfo.value.code == 2


def test_unexpected_errors_exit_with_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_export(*_: object, **__: object) -> int:
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(cli, "export_prices", fake_export)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["export", "--output", "out.json"])

    assert excinfo.value.code == 1


def test_unknown_command_is_rejected_by_argparse() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["rebuild"])

    assert excinfo.value.code == 2


def test_union_help_says_summary_is_logged(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["union", "--help"])

    help_text = " ".join(capsys.readouterr().out.split())
    assert excinfo.value.code == 0
    assert "omit to log a summary only" in help_text
    assert "stdout" not in help_text
