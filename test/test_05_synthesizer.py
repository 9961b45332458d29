###############################################################################
# focalmaker Test Suite
# Test # 05 - Seismogram synthesis
# file: /test/test_05_synthesizer.py
#
# Description
#
# Combination of Green's function basis traces into Z, R, T seismograms.
#
###############################################################################

import asyncio
import json

import numpy as np
import pytest

from focalmaker.momenttensor import strike_dip_rake_to_moment_tensor
from focalmaker.synthesizer import synthesize, synthesize_async, combine, CHANNEL_MAP, ALL_CHANNELS
from focalmaker.gf_extensions import InMemoryStore, JSONDirectoryStore
from focalmaker.greensfunctions import GREENS_NPTS


@pytest.fixture(scope="module")
def traces():
    rng = np.random.default_rng(2024)
    return {ch: rng.normal(size=GREENS_NPTS)*1e-20 for ch in ALL_CHANNELS}


@pytest.fixture
def mt():
    return strike_dip_rake_to_moment_tensor(30., 45., 60., 6.)


def test_channel_map():
    assert CHANNEL_MAP["Z"] == ("ZSS", "ZDD", "ZEP", "ZDS")
    assert CHANNEL_MAP["R"] == ("RSS", "RDD", "REP", "RDS")
    assert CHANNEL_MAP["T"] == ("TSS", "TDS")
    assert len(ALL_CHANNELS) == 10


def test_output_shape(mt, traces):
    seis = synthesize(mt, 45., InMemoryStore(traces))
    assert seis.nsamples == 4000
    assert len(seis.Z) == len(seis.R) == len(seis.T) == 4000
    assert seis.dt == 0.25
    np.testing.assert_allclose(seis.time, np.arange(4000)/4)
    assert seis.metadata["missing_channels"] == []
    assert seis.metadata["azimuth"] == 45.


def test_zero_azimuth_reduction(mt, traces):
    seis = synthesize(mt, 0., InMemoryStore(traces))
    g = {ch: tr[:4000] for ch, tr in traces.items()}

    for comp in ["Z", "R"]:
        ss, dd, ep, ds = (g[ch] for ch in CHANNEL_MAP[comp])
        expected = mt.Mtt*(ss/2 - dd/6 + ep/3) + \
            mt.Mpp*(-ss/2 - dd/6 + ep/3) + \
            mt.Mrr*(dd/3 + ep/3) + \
            mt.Mrt*ds
        np.testing.assert_allclose(seis[comp], expected, rtol=1e-12, atol=1e-12*np.abs(expected).max())

    ss, ds = g["TSS"], g["TDS"]
    expected = -mt.Mtp*ss - mt.Mrp*ds
    np.testing.assert_allclose(seis.T, expected, rtol=1e-12, atol=1e-12*np.abs(expected).max())


def test_per_sample_formula(mt, traces):
    az = np.radians(123.)
    seis = synthesize(mt, 123., InMemoryStore(traces), nsamples=50)
    for i in [0, 17, 49]:
        ss, dd, ep, ds = (traces[ch][i] for ch in CHANNEL_MAP["R"])
        r = mt.Mtt*(ss/2*np.cos(2*az) - dd/6 + ep/3) + \
            mt.Mpp*(-ss/2*np.cos(2*az) - dd/6 + ep/3) + \
            mt.Mrr*(dd/3 + ep/3) + \
            mt.Mtp*(ss*np.sin(2*az)) + \
            mt.Mrt*(ds*np.cos(az)) + \
            mt.Mrp*(ds*np.sin(az))
        assert seis.R[i] == pytest.approx(r, rel=1e-12)

        ss, ds = traces["TSS"][i], traces["TDS"][i]
        t = mt.Mtt*(ss/2*np.sin(2*az)) - mt.Mpp*(ss/2*np.sin(2*az)) - \
            mt.Mtp*(ss*np.cos(2*az)) + mt.Mrt*(ds*np.sin(az)) - mt.Mrp*(ds*np.cos(az))
        assert seis.T[i] == pytest.approx(t, rel=1e-12)


def test_missing_channel_equals_zero_channel(mt, traces):
    without_zds = {ch: tr for ch, tr in traces.items() if ch != "ZDS"}
    zeroed_zds = dict(traces, ZDS=np.zeros(GREENS_NPTS))

    seis_missing = synthesize(mt, 45., InMemoryStore(without_zds))
    seis_zero = synthesize(mt, 45., InMemoryStore(zeroed_zds))

    np.testing.assert_array_equal(seis_missing.Z, seis_zero.Z)
    np.testing.assert_array_equal(seis_missing.R, seis_zero.R)
    np.testing.assert_array_equal(seis_missing.T, seis_zero.T)
    assert seis_missing.metadata["missing_channels"] == ["ZDS"]


def test_unusable_record_is_zero_filled(mt, traces, tmp_path):
    for ch, tr in traces.items():
        record = {"data": "unavailable"} if ch == "ZDS" else {"data": tr[:10].tolist()}
        (tmp_path / f"{ch}.json").write_text(json.dumps(record))

    store = JSONDirectoryStore(tmp_path, npts=10)
    seis = synthesize(mt, 45., store, nsamples=10)

    zeroed_zds = {ch: tr[:10] for ch, tr in traces.items()}
    zeroed_zds["ZDS"] = np.zeros(10)
    expected = synthesize(mt, 45., InMemoryStore(zeroed_zds), nsamples=10)

    assert seis.metadata["missing_channels"] == ["ZDS"]
    np.testing.assert_array_equal(seis.Z, expected.Z)
    np.testing.assert_array_equal(seis.R, expected.R)
    np.testing.assert_array_equal(seis.T, expected.T)


def test_empty_store_gives_zeros(mt):
    seis = synthesize(mt, 10., InMemoryStore({}))
    np.testing.assert_array_equal(seis.Z, 0.)
    np.testing.assert_array_equal(seis.R, 0.)
    np.testing.assert_array_equal(seis.T, 0.)
    assert sorted(seis.metadata["missing_channels"]) == sorted(ALL_CHANNELS)


def test_linear_in_moment(traces):
    store = InMemoryStore(traces)
    factor = 10**1.5
    mt1 = strike_dip_rake_to_moment_tensor(75., 35., -20., 4.)
    mt2 = strike_dip_rake_to_moment_tensor(75., 35., -20., 5.)

    s1 = synthesize(mt1, 200., store)
    s2 = synthesize(mt2, 200., store)
    for comp in ["Z", "R", "T"]:
        np.testing.assert_allclose(s2[comp], factor*s1[comp], rtol=1e-9, atol=1e-12*np.abs(s2[comp]).max())


def test_short_traces_are_padded(mt):
    store = InMemoryStore({ch: np.ones(100) for ch in ALL_CHANNELS})
    seis = synthesize(mt, 30., store, nsamples=300)
    assert seis.nsamples == 300
    assert np.all(seis.Z[:100] != 0.)
    np.testing.assert_array_equal(seis.Z[100:], 0.)
    np.testing.assert_array_equal(seis.T[100:], 0.)


def test_traces_are_not_modified(mt, traces):
    before = {ch: tr.copy() for ch, tr in traces.items()}
    synthesize(mt, 45., InMemoryStore(traces))
    combine(mt, 45., traces)
    for ch in ALL_CHANNELS:
        np.testing.assert_array_equal(traces[ch], before[ch])


def test_combine_matches_synthesize(mt, traces):
    seis = synthesize(mt, 77., InMemoryStore(traces), nsamples=1000, dt=0.5)
    direct = combine(mt, 77., traces, nsamples=1000, dt=0.5)
    np.testing.assert_array_equal(seis.Z, direct.Z)
    assert direct.dt == 0.5


def test_async_inside_event_loop(mt, traces):
    async def main():
        return await synthesize_async(mt, 45., InMemoryStore(traces))

    seis = asyncio.run(main())
    np.testing.assert_array_equal(seis.Z, synthesize(mt, 45., InMemoryStore(traces)).Z)


def test_missing_channel_warning(mt, traces, caplog):
    without = {ch: tr for ch, tr in traces.items() if ch != "TDS"}
    with caplog.at_level("WARNING"):
        synthesize(mt, 45., InMemoryStore(without))
    assert "TDS" in caplog.text
