"""
Load a tree into an ete3 tree data structure and convert it into a matrix of
patristic distances.
"""

from physamp._private import check
from physamp._private.interface import get_progress_bar
from physamp.matrix import DistanceMatrix
from physamp.errors import InvalidInputError

import ete3
from ete3 import Tree
import dendropy as dp
import numpy as np

import warnings

def read_tree(tree,fmt=None):
    """
    Load a tree into an ete3 tree data structure.

    Parameters
    ----------
    tree : ete3.Tree or dendropy.Tree or str
        some sort of tree. can be an ete3.Tree (returns self), a dendropy Tree
        (converts to newick and drops root), a newick file or a newick string.
    fmt : int or None
        format for reading tree from newick. 0-9 or 100. (See Notes for what
        these mean). If fmt is None, try to parse without a format descriptor,
        then these formats in numerical order.

    Returns
    -------
    tree : ete3.Tree
        an ete3 tree object.

    Notes
    -----
    `fmt` number is read directly by ete3. See their documentation for how these
    are read (http://etetoolkit.org/docs/latest/tutorial/tutorial_trees.html#reading-and-writing-newick-trees).
    As of ETE3.1.1, these numbers mean:

    + 0: flexible with support values
    + 1: flexible with internal node names
    + 2: all branches + leaf names + internal supports
    + 3: all branches + all names
    + 4: leaf branches + leaf names
    + 5: internal and leaf branches + leaf names
    + 6: internal branches + leaf names
    + 7: leaf branches + all names
    + 8: all names
    + 9: leaf names
    + 100: topology only
    """

    # Already an ete3 tree.
    if issubclass(type(tree),ete3.TreeNode):
        return tree

    # Convert dendropy tree into newick (drop root)
    if issubclass(type(tree),dp.Tree):
        tree = tree.as_string(schema="newick",suppress_rooting=True)

    if type(tree) is not str:
        err = f"\ntree '{tree}' should be an ete3.Tree, a dendropy.Tree, a\n"
        err += "newick string, or a newick file.\n\n"
        raise InvalidInputError(err)

    if fmt is not None:
        try:
            return Tree(tree,format=fmt)
        except ete3.parser.newick.NewickError as e:
            err = f"\n\nCould not parse tree with format {fmt}.\n\n"
            raise InvalidInputError(err) from e

    try:
        return Tree(tree)
    except ete3.parser.newick.NewickError:
        pass

    # Try all possible formats now, in succession
    formats = list(range(10))
    formats.append(100)
    for f in formats:
        try:
            t = Tree(tree,format=f)
        except ete3.parser.newick.NewickError:
            continue

        w = f"\n\nCould not parse tree without a format string, but parsed it\n"
        w += f"with format style {f}. Please check output carefully. See the\n"
        w += "ete3 documentation for details:\n\n"
        w += "http://etetoolkit.org/docs/latest/tutorial/tutorial_trees.html#reading-and-writing-newick-trees\n\n"
        warnings.warn(w)

        return t

    err = "\n\nCould not parse tree!\n\n"
    raise InvalidInputError(err)


def tree_to_matrix(tree,fmt=None,silent=True):
    """
    Build a matrix of patristic distances (sum of branch lengths along the path
    between leaves) for every pair of leaves in a tree.

    Parameters
    ----------
    tree : ete3.Tree or dendropy.Tree or str
        tree to convert (see read_tree)
    fmt : int or None
        newick format passed to read_tree
    silent : bool, default=True
        if False, show a progress bar

    Returns
    -------
    physamp.matrix.DistanceMatrix
        distances between leaves, labeled by leaf name in tree traversal order
    """

    silent = check.check_bool(silent,"silent")

    T = read_tree(tree,fmt=fmt)

    leaves = T.get_leaves()
    names = [leaf.name for leaf in leaves]

    if any([n is None or n == "" for n in names]):
        err = "\nAll leaves in the tree must have names.\n\n"
        raise InvalidInputError(err)

    if len(set(names)) != len(names):
        err = "\nLeaf names in the tree must be unique.\n\n"
        raise InvalidInputError(err)

    num_leaves = len(leaves)
    values = np.zeros((num_leaves,num_leaves),dtype=float)

    P = get_progress_bar(silent)
    with P(total=(num_leaves*(num_leaves - 1))//2) as pbar:
        for i in range(num_leaves):
            for j in range(i+1,num_leaves):
                d = T.get_distance(leaves[i],leaves[j])
                values[i,j] = d
                values[j,i] = d
                pbar.update(1)

    return DistanceMatrix(names,values)
