import pytest

import physamp
from physamp.sample.policy import Threshold, TargetSize, PreferLonger, Random
from physamp.sample.policy import SamplingPolicy, build_policy
from physamp.errors import InvalidInputError

import numpy as np

def test_Threshold():

    assert Threshold(0.01).threshold == 0.01
    assert Threshold(0).threshold == 0
    assert Threshold("0.5").threshold == 0.5

    bad_threshold = [None,-1,"test",[0.1],np.nan,float]
    for b in bad_threshold:
        print(f"trying bad threshold {b}")
        with pytest.raises(InvalidInputError):
            Threshold(b)


def test_TargetSize():

    assert TargetSize(10).sample_size == 10
    assert TargetSize(1).sample_size == 1

    bad_size = [None,0,-1,1.5,"test",[1],int]
    for b in bad_size:
        print(f"trying bad sample_size {b}")
        with pytest.raises(InvalidInputError):
            TargetSize(b)


def test_PreferLonger():

    p = PreferLonger()
    scores = np.array([10,5,10])

    # Lower score removed regardless of position
    assert p.choose(0,1,scores) == 1
    assert p.choose(1,2,scores) == 1

    # Tie removes the later sequence
    assert p.choose(0,2,scores) == 2


def test_Random():

    r = Random(seed=5)
    assert issubclass(type(r.rng),np.random.Generator)

    # Same seed gives same choices
    a = Random(seed=5)
    b = Random(seed=5)
    a_choices = [a.choose(0,1,None) for _ in range(50)]
    b_choices = [b.choose(0,1,None) for _ in range(50)]
    assert a_choices == b_choices

    # Both members get chosen at some point
    assert set(a_choices) == {0,1}

    # Pass in a generator
    rng = np.random.default_rng(1)
    r = Random(rng)
    assert r.rng is rng

    # No seed
    r = Random()
    assert r.choose(3,4,None) in [3,4]

    bad_seed = [-1,1.5,"test",[1]]
    for b in bad_seed:
        with pytest.raises(InvalidInputError):
            Random(b)


def test_SamplingPolicy():

    p = SamplingPolicy(Threshold(0.1),Random(0))
    assert type(p.stop_condition) is Threshold
    assert type(p.tie_break) is Random

    # Default tie_break
    p = SamplingPolicy(TargetSize(3))
    assert type(p.tie_break) is PreferLonger

    bad_stop = [None,0.1,"threshold",Threshold,PreferLonger()]
    for b in bad_stop:
        with pytest.raises(InvalidInputError):
            SamplingPolicy(b,PreferLonger())

    bad_tie = [0.1,"length",PreferLonger,Threshold(0.1)]
    for b in bad_tie:
        with pytest.raises(InvalidInputError):
            SamplingPolicy(Threshold(0.1),b)


def test_build_policy():

    # Defaults match the traditional sampler
    p = build_policy()
    assert type(p.stop_condition) is Threshold
    assert p.stop_condition.threshold == 0.01
    assert type(p.tie_break) is PreferLonger

    p = build_policy(deletion_method="sample",sample_size=3)
    assert type(p.stop_condition) is TargetSize
    assert p.stop_condition.sample_size == 3

    p = build_policy(choice_criterion="length.complete")
    assert type(p.tie_break) is PreferLonger

    p = build_policy(choice_criterion="random",seed=3)
    assert type(p.tie_break) is Random

    bad_method = [None,1,"thresh","Sample"]
    for b in bad_method:
        with pytest.raises(InvalidInputError):
            build_policy(deletion_method=b)

    bad_criterion = [None,1,"len","random.complete"]
    for b in bad_criterion:
        with pytest.raises(InvalidInputError):
            build_policy(choice_criterion=b)

    with pytest.raises(InvalidInputError):
        build_policy(deletion_method="threshold",threshold=-1)

    with pytest.raises(InvalidInputError):
        build_policy(deletion_method="sample",sample_size=0)
