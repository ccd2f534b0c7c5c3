"""
End-to-end proof sessions through the public package API.
"""

import pytest

import schnorr_pok
from schnorr_pok import (
    ChallengeMode,
    FiatShamirChallenge,
    KeyPair,
    KeyPairGenerator,
    ProtocolViolation,
    Prover,
    ProverState,
    RandomnessSource,
    Verifier,
    get_challenge_generator,
    get_group,
    prove,
    run_interactive,
    verify,
)


@pytest.fixture(scope="module")
def params():
    return get_group("rfc3526-2048")


@pytest.fixture(scope="module")
def key_pair(params):
    return KeyPairGenerator(RandomnessSource()).generate(params)


def test_public_api_exports():
    for name in schnorr_pok.__all__:
        assert hasattr(schnorr_pok, name), name


def test_interactive_session_step_by_step(params, key_pair):
    prover = Prover(key_pair, params)
    verifier = Verifier(get_challenge_generator("interactive"))

    assert prover.state is ProverState.IDLE
    r, t = prover.commit()
    assert prover.state is ProverState.COMMITTED

    e = verifier.issue_challenge(params, key_pair.public_key, t)
    s = prover.respond(r, e, key_pair.private_key, params.q)
    assert prover.state is ProverState.RESPONDED

    assert verifier.verify(params.g, s, params.p, t, key_pair.public_key, e)

    with pytest.raises(ProtocolViolation):
        prover.respond(r, e)


def test_non_interactive_session(params, key_pair):
    challenger = get_challenge_generator("fiat-shamir", hash_name="SHA256")
    transcript = prove(params, key_pair, challenger)

    assert transcript.mode is ChallengeMode.FIAT_SHAMIR
    assert transcript.challenge == FiatShamirChallenge(hash_name="SHA256").produce_challenge(
        params, transcript.public_key, transcript.commitment
    )
    assert Verifier(challenger).verify_transcript(transcript)


def test_run_interactive(params, key_pair):
    transcript, accepted = run_interactive(params, key_pair)

    assert accepted is True
    assert transcript.mode is ChallengeMode.INTERACTIVE


def test_independent_sessions_do_not_share_nonces(params, key_pair):
    provers = [Prover(key_pair, params) for _ in range(4)]
    commitments = [prover.commit() for prover in provers]

    assert len({c.commitment for c in commitments}) == 4

    for prover, (r, t) in zip(provers, commitments):
        e = Verifier().issue_challenge(params, key_pair.public_key, t)
        s = prover.respond(r, e)
        assert verify(params.g, s, params.p, t, key_pair.public_key, e)


def test_toy_walkthrough():
    params = get_group("toy")
    key_pair = KeyPair.from_private_key(params, 6)

    assert key_pair.public_key == 2
    assert verify(params.g, 0, params.p, 18, key_pair.public_key, 5)
