"""
Labeled, symmetric pairwise distance matrix.
"""

from physamp.errors import InvalidInputError

import numpy as np
import pandas as pd

class DistanceMatrix:
    """
    Square, symmetric matrix of pairwise distances with a label attached to
    each row/column. The matrix is immutable once constructed. Values on the
    diagonal are ignored.

    Parameters
    ----------
    labels : list-like
        unique string labels, one for each row/column
    values : array-like
        n x n array of distances. Must be symmetric, finite and non-negative
        off the diagonal.
    """

    def __init__(self,labels,values):

        if isinstance(labels,str) or not hasattr(labels,"__iter__"):
            err = "\nlabels must be a list of strings.\n\n"
            raise InvalidInputError(err)

        labels = tuple(labels)
        if len(labels) < 1:
            err = "\nA distance matrix must have at least one entry.\n\n"
            raise InvalidInputError(err)

        for label in labels:
            if type(label) is not str:
                err = f"\nlabel '{label}' is not a string. All labels must be\n"
                err += "strings.\n\n"
                raise InvalidInputError(err)

        if len(set(labels)) != len(labels):
            seen = set()
            duplicates = []
            for label in labels:
                if label in seen:
                    duplicates.append(label)
                seen.add(label)
            err = "\nlabels must be unique. Duplicated labels:\n\n"
            for d in duplicates:
                err += f"    {d}\n"
            err += "\n"
            raise InvalidInputError(err)

        try:
            values = np.array(values,dtype=float)
        except (TypeError,ValueError):
            err = "\nvalues could not be interpreted as an array of floats.\n\n"
            raise InvalidInputError(err)

        n = len(labels)
        if values.shape != (n,n):
            err = f"\nvalues should have shape ({n}, {n}) to match the number\n"
            err += f"of labels. Got shape {values.shape}.\n\n"
            raise InvalidInputError(err)

        # Diagonal is not used, so blank it to keep checks below simple
        np.fill_diagonal(values,0.0)

        if not np.all(np.isfinite(values)):
            err = "\nAll distances must be finite numbers.\n\n"
            raise InvalidInputError(err)

        if np.any(values < 0):
            err = "\nAll distances must be non-negative.\n\n"
            raise InvalidInputError(err)

        if not np.allclose(values,values.T):
            err = "\nDistance matrix is not symmetric.\n\n"
            raise InvalidInputError(err)

        values.flags.writeable = False

        self._labels = labels
        self._values = values
        self._label_to_index = dict([(label,i) for i, label in enumerate(labels)])

    @classmethod
    def from_dataframe(cls,df):
        """
        Create a DistanceMatrix from a square pandas.DataFrame whose index and
        columns hold the same labels in the same order.

        Parameters
        ----------
        df : pandas.DataFrame
            square dataframe of distances

        Returns
        -------
        DistanceMatrix
        """

        if not issubclass(type(df),pd.DataFrame):
            err = f"\ndf '{df}' must be a pandas.DataFrame.\n\n"
            raise InvalidInputError(err)

        index = [str(i) for i in df.index]
        columns = [str(c) for c in df.columns]
        if index != columns:
            err = "\nThe dataframe index and columns must hold the same labels\n"
            err += "in the same order.\n\n"
            raise InvalidInputError(err)

        try:
            values = df.to_numpy(dtype=float)
        except (TypeError,ValueError):
            err = "\nAll entries in the dataframe must be numbers.\n\n"
            raise InvalidInputError(err)

        return cls(index,values)

    def to_dataframe(self):
        """
        Return the matrix as a square pandas.DataFrame keyed by label.
        """

        return pd.DataFrame(np.array(self._values),
                            index=list(self._labels),
                            columns=list(self._labels))

    def index(self,label):
        """
        Index of label in the matrix.
        """

        try:
            return self._label_to_index[label]
        except (KeyError,TypeError):
            err = f"\nlabel '{label}' is not in the distance matrix.\n\n"
            raise InvalidInputError(err)

    def distance(self,a,b):
        """
        Distance between the sequences labeled a and b.
        """

        return float(self._values[self.index(a),self.index(b)])

    def subset(self,labels):
        """
        Return a new DistanceMatrix holding only labels, in the order given.
        """

        idx = [self.index(label) for label in labels]

        return DistanceMatrix(list(labels),self._values[np.ix_(idx,idx)])

    def min_distance(self,labels=None):
        """
        Smallest pairwise distance among labels.

        Parameters
        ----------
        labels : list-like, optional
            labels to consider. If None, use every label in the matrix.

        Returns
        -------
        float or None
            smallest distance, or None if fewer than two labels are given
        """

        if labels is None:
            idx = np.arange(len(self._labels))
        else:
            idx = np.array([self.index(label) for label in labels],dtype=int)

        if len(idx) < 2:
            return None

        sub = self._values[np.ix_(idx,idx)]
        upper = np.triu_indices(len(idx),k=1)

        return float(np.min(sub[upper]))

    @property
    def labels(self):
        """
        Labels for each row/column, in matrix order.
        """
        return self._labels

    @property
    def values(self):
        """
        Read-only numpy array of distances.
        """
        return self._values

    @property
    def size(self):
        """
        Number of sequences in the matrix.
        """
        return len(self._labels)

    def __len__(self):
        return len(self._labels)

    def __getitem__(self,key):
        i, j = key
        return float(self._values[i,j])

    def __contains__(self,label):
        return label in self._label_to_index

    def __repr__(self):
        return f"DistanceMatrix(n={len(self._labels)})"
