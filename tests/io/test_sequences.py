import pytest

import physamp
from physamp.io.sequences import read_sequences, write_sequences
from physamp.errors import InvalidInputError

from Bio import SeqIO

import os

def test_read_sequences(tiny_sample,tmpdir):

    seqs = read_sequences(tiny_sample["seqs.fasta"])
    assert list(seqs.keys()) == ["A","B","C","D","E"]
    assert str(seqs["A"].seq) == "ACGTACGTACGTACGTACGT"
    assert str(seqs["E"].seq) == "ACGTACGTACGTACG"

    with pytest.raises(InvalidInputError):
        read_sequences(tiny_sample["duplicate-ids.fasta"])

    with pytest.raises(FileNotFoundError):
        read_sequences(os.path.join(tmpdir,"not-a-file.fasta"))

    bad_file = [None,1,["seqs.fasta"]]
    for b in bad_file:
        with pytest.raises(InvalidInputError):
            read_sequences(b)

    with pytest.raises(InvalidInputError):
        read_sequences(tiny_sample["seqs.fasta"],seq_format="not-a-format")

    # A file with no sequences in it
    empty_file = os.path.join(tmpdir,"empty.fasta")
    with open(empty_file,"w") as f:
        f.write("\n")
    with pytest.raises(InvalidInputError):
        read_sequences(empty_file)


def test_write_sequences(tiny_sample,tmpdir):

    seqs = read_sequences(tiny_sample["seqs.fasta"])

    out_file = os.path.join(tmpdir,"out.fasta")
    num_written = write_sequences(seqs,["E","A"],out_file)
    assert num_written == 2

    written = list(SeqIO.parse(out_file,"fasta"))
    assert [r.id for r in written] == ["E","A"]
    assert str(written[1].seq) == str(seqs["A"].seq)

    # Will not overwrite
    with pytest.raises(FileExistsError):
        write_sequences(seqs,["A"],out_file)

    write_sequences(seqs,["C"],out_file,overwrite=True)
    written = list(SeqIO.parse(out_file,"fasta"))
    assert [r.id for r in written] == ["C"]

    # Different output format
    out_file = os.path.join(tmpdir,"out.phy")
    write_sequences(seqs,["A","C","D"],out_file,out_format="phylip-relaxed")
    written = list(SeqIO.parse(out_file,"phylip-relaxed"))
    assert [r.id for r in written] == ["A","C","D"]

    with pytest.raises(InvalidInputError):
        write_sequences(seqs,["A","Z"],os.path.join(tmpdir,"bad.fasta"))

    bad_labels = [None,"A",[]]
    for b in bad_labels:
        with pytest.raises(InvalidInputError):
            write_sequences(seqs,b,os.path.join(tmpdir,"bad.fasta"))

    with pytest.raises(InvalidInputError):
        write_sequences(seqs,["A"],None)

    with pytest.raises(InvalidInputError):
        write_sequences(seqs,["A"],os.path.join(tmpdir,"bad.fasta"),overwrite="test")
