import pytest

import physamp
from physamp.scores import count_sites, count_complete_sites, get_scores
from physamp.errors import InvalidInputError

from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

def test_count_sites():

    assert count_sites("ACGT") == 4
    assert count_sites("AC-T") == 4
    assert count_sites("") == 0
    assert count_sites(Seq("ACGTNN")) == 6
    assert count_sites(SeqRecord(Seq("ACGTNN--"),id="A")) == 8

    with pytest.raises(InvalidInputError):
        count_sites(None)


def test_count_complete_sites():

    assert count_complete_sites("ACGT") == 4
    assert count_complete_sites("acgt") == 4
    assert count_complete_sites("AC-T") == 3
    assert count_complete_sites("ACGTNNRY?") == 4
    assert count_complete_sites(SeqRecord(Seq("ACGTNN--"),id="A")) == 4

    # U is only complete in RNA
    assert count_complete_sites("ACGU",alphabet="DNA") == 3
    assert count_complete_sites("ACGU",alphabet="RNA") == 4

    # X, B, Z, gaps are not complete amino acids
    assert count_complete_sites("MKLVX-BZ",alphabet="Protein") == 4

    bad_alphabet = [None,1,"dna","Proteins"]
    for b in bad_alphabet:
        with pytest.raises(InvalidInputError):
            count_complete_sites("ACGT",alphabet=b)


def test_get_scores():

    sequences = {"A":SeqRecord(Seq("ACGTACGT"),id="A"),
                 "B":SeqRecord(Seq("ACGTAC--"),id="B"),
                 "C":"ACGTNNNNNN"}

    scores = get_scores(sequences,["A","B","C"])
    assert scores == {"A":8,"B":8,"C":10}

    scores = get_scores(sequences,["A","B","C"],choice_criterion="length.complete")
    assert scores == {"A":8,"B":6,"C":4}

    # Random does not use scores, but still gets a number for each label
    scores = get_scores(sequences,["A","B","C"],choice_criterion="random")
    assert scores == {"A":8,"B":8,"C":10}

    # Only score requested labels
    scores = get_scores(sequences,("C","A"))
    assert list(scores.keys()) == ["C","A"]

    with pytest.raises(InvalidInputError):
        get_scores(sequences,["A","Z"])

    bad_criterion = [None,1,"lengths","complete"]
    for b in bad_criterion:
        with pytest.raises(InvalidInputError):
            get_scores(sequences,["A"],choice_criterion=b)

    with pytest.raises(InvalidInputError):
        get_scores(sequences,"A")
