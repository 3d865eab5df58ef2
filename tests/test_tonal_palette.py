from __future__ import annotations

"""TonalPalette のメモ化と構築の基本動作テスト。"""

import threading
import time

import pytest

from monet import TonalPalette, ViewingConditions


def test_from_hue_and_chroma_stores_values_verbatim(counting_model):
    p = TonalPalette.from_hue_and_chroma(412.5, -3.0, counting_model)
    assert p.get_hue() == 412.5
    assert p.get_chroma() == -3.0
    assert p.hue == 412.5 and p.chroma == -3.0
    assert p.cached_tones() == []
    assert counting_model.decompose_calls == []


def test_from_int_decomposes_once(make_model):
    model = make_model(seeds={0xFF112233: (210.0, 37.5)})
    p = TonalPalette.from_int(0xFF112233, model)
    assert (p.get_hue(), p.get_chroma()) == (210.0, 37.5)
    assert model.decompose_calls == [0xFF112233]


def test_tone_is_memoized(counting_model):
    p = TonalPalette.from_hue_and_chroma(30.0, 48.0, counting_model)
    results = [p.tone(40) for _ in range(5)]
    assert results == [30520] * 5
    assert counting_model.compose_calls[(30.0, 48.0, 40)] == 1
    assert p.cached_tones() == [40]


def test_distinct_tones_compose_separately(counting_model):
    p = TonalPalette.from_hue_and_chroma(10.0, 5.0, counting_model)
    assert p.tone(0) == 10050
    assert p.tone(100) == 10150
    assert p.cached_tones() == [0, 100]
    assert sum(counting_model.compose_calls.values()) == 2


@pytest.mark.parametrize("tone", [-5, 150])
def test_out_of_range_tone_is_forwarded_and_cached(counting_model, tone):
    p = TonalPalette.from_hue_and_chroma(1.0, 2.0, counting_model)
    assert p.tone(tone) == 1000 + 20 + tone
    assert p.tone(tone) == 1000 + 20 + tone
    assert counting_model.compose_calls[(1.0, 2.0, tone)] == 1
    assert p.cached_tones() == [tone]


def test_default_viewing_conditions_are_passed(counting_model):
    p = TonalPalette.from_hue_and_chroma(0.0, 0.0, counting_model)
    p.tone(50)
    assert counting_model.viewing_conditions_seen == [ViewingConditions.DEFAULT]


def test_custom_viewing_conditions_are_passed(counting_model):
    vc = ViewingConditions(space="hct-dim")
    p = TonalPalette.from_hue_and_chroma(0.0, 0.0, counting_model, vc)
    p.tone(50)
    assert p.viewing_conditions is vc
    assert counting_model.viewing_conditions_seen == [vc]


def test_compose_error_propagates_and_is_not_cached(make_model):
    calls = []

    def failing(h, c, t):
        calls.append(t)
        if len(calls) == 1:
            raise ArithmeticError("model failure")
        return 7

    p = TonalPalette.from_hue_and_chroma(0.0, 0.0, make_model(compose_fn=failing))
    with pytest.raises(ArithmeticError):
        p.tone(20)
    assert p.cached_tones() == []
    assert p.tone(20) == 7
    assert calls == [20, 20]


def test_concurrent_requests_compose_once(make_model):
    def slow(h, c, t):
        time.sleep(0.01)
        return int(t)

    model = make_model(compose_fn=slow)
    p = TonalPalette.from_hue_and_chroma(0.0, 0.0, model)
    barrier = threading.Barrier(8)
    results: list[int] = []
    lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        value = p.tone(60)
        with lock:
            results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    assert results == [60] * 8
    assert model.compose_calls[(0.0, 0.0, 60)] == 1


def test_debug_logging_accepts_non_int_results(counting_model, caplog):
    # the stub composes floats (30520.0); logging must not assume an int
    p = TonalPalette.from_hue_and_chroma(30.0, 48.0, counting_model)
    with caplog.at_level("DEBUG", logger="monet"):
        assert p.tone(40) == 30520
    assert "composed tone=40" in caplog.text
    assert "30520.0" in caplog.text


class _UndefinedHueColor:
    """coloraide の Color を模し、色相 NaN の HCT 座標を返す。"""

    def __init__(self, space, coords):
        self.coords_in = coords

    def convert(self, space):
        return self

    def coords(self):
        return [float("nan"), 0.0, 0.0]


def test_undefined_hue_decomposes_to_zero():
    from monet import HctModel

    model = HctModel(color_class=_UndefinedHueColor)  # type: ignore[arg-type]
    assert model.decompose(0xFF000000) == (0.0, 0.0)
    assert model.tone_of(0xFF000000) == 0.0
