"""共通フィクスチャ。

- 呼び出し回数を数えるスタブ外観モデル（compose(h, c, t) = h*1000 + c*10 + t）
- YAML 構成の探索先を一時ディレクトリへ隔離
"""

from __future__ import annotations

from collections import Counter
from typing import Callable, Dict, Iterator, Tuple

import pytest


class CountingModel:
    """decompose/compose を記録するスタブ AppearanceModel。"""

    def __init__(
        self,
        seeds: Dict[int, Tuple[float, float]] | None = None,
        tones: Dict[int, float] | None = None,
        compose_fn: Callable[[float, float, float], int] | None = None,
    ) -> None:
        self.seeds = dict(seeds or {})
        self.tones = dict(tones or {})
        self.compose_fn = compose_fn or (lambda h, c, t: h * 1000 + c * 10 + t)
        self.decompose_calls: list[int] = []
        self.compose_calls: Counter = Counter()
        self.viewing_conditions_seen: list[object] = []

    def decompose(self, argb: int) -> Tuple[float, float]:
        self.decompose_calls.append(argb)
        return self.seeds.get(argb, (30.0, 20.0))

    def compose(self, hue: float, chroma: float, tone: float, viewing_conditions: object) -> int:
        self.compose_calls[(hue, chroma, tone)] += 1
        self.viewing_conditions_seen.append(viewing_conditions)
        return self.compose_fn(hue, chroma, tone)

    def tone_of(self, argb: int) -> float:
        return self.tones.get(argb, 50.0)


@pytest.fixture()
def counting_model() -> CountingModel:
    return CountingModel()


@pytest.fixture()
def make_model() -> Callable[..., CountingModel]:
    return CountingModel


@pytest.fixture()
def isolated_config(tmp_path, monkeypatch: pytest.MonkeyPatch) -> Iterator:
    """MONET_CONFIG を外した状態で tmp_path をプロジェクトルートとして返す。"""
    monkeypatch.delenv("MONET_CONFIG", raising=False)
    (tmp_path / "configs").mkdir()
    yield tmp_path
