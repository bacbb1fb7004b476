from p256vrf.crypto.params import Keypair
from p256vrf.crypto.vrf import evaluate, proof_to_hash
from p256vrf.utils.profiling import Profiler, profiled


@profiled
def decorated(x):
    return x ** 2


def test_profiler_decorator():
    with Profiler().as_default() as profiler:
        assert decorated(2) == 4
        assert len(profiler.data['decorated']) == 1
        assert decorated(3) == 9
        assert len(profiler.data['decorated']) == 2


def test_profiler_inactive():
    assert Profiler.get_default() is None
    assert decorated(4) == 16


def test_profiler_stats():
    profiler = Profiler()
    profiler.data = {'test': [1.]}
    assert profiler.compute_stats() == \
        {'test': {'avg': 1., 'min': 1., 'max': 1., 'num': 1}}
    profiler.data = {'test': [1., 1., 1., 2.]}
    assert profiler.compute_stats() == \
        {'test': {'avg': 1.25, 'min': 1., 'max': 2., 'std': 0.5, 'num': 4}}


def test_profiler_prefix():
    profiler = Profiler(prefix='vrf.')
    profiler.data = {'evaluate': [1., 3.]}
    stats = profiler.compute_stats()
    assert list(stats) == ['vrf.evaluate']
    assert 'std' in stats['vrf.evaluate']


def test_profiler_vrf_operations():
    keypair = Keypair.generate()
    with Profiler().as_default() as profiler:
        vrf = evaluate(keypair.sk, b"test@test.com")
        proof_to_hash(keypair.pk, b"test@test.com", vrf.proof)
    assert len(profiler.data['evaluate']) == 1
    assert len(profiler.data['proof_to_hash']) == 1
