# -*- coding: utf-8 -*-
"""A minimal tissue hierarchy tree and the leaf-to-path mapping exported with hierarchical tissue files.

Any tree whose nodes expose `name`, `is_folder`, `parent` and `children` can be used in place of HierarchyItem.
"""


class HierarchyItem:
    """A folder or leaf in a tissue hierarchy."""

    def __init__(self, name, is_folder=False, parent=None):
        """Initialize a hierarchy node.

        Parameters:
        -----------
        name : str
            Folder name, or the tissue name for leaves
        is_folder : bool
            Whether the node groups other nodes
        parent : HierarchyItem, optional
            Parent node; the new node is appended to its children
        """
        self.name = name
        self.is_folder = is_folder
        self.parent = None
        self.children = []

        if parent is not None:
            parent.add_child(self)

    def add_child(self, item):
        """Attach a node below this one and return it."""
        item.parent = self
        self.children.append(item)
        return item

    def add_folder(self, name):
        """Create a sub folder."""
        return HierarchyItem(name, is_folder=True, parent=self)

    def add_leaf(self, name):
        """Create a tissue leaf."""
        return HierarchyItem(name, is_folder=False, parent=self)

    def __str__(self):
        kind = "folder" if self.is_folder else "leaf"
        return f"HierarchyItem '{self.name}' ({kind}, children: {len(self.children)})"


def iter_leaves(root):
    """Yield all leaves below `root`, depth first in child order."""
    for item in root.children:
        if item.is_folder:
            yield from iter_leaves(item)
        else:
            yield item


def build_hierarchy_map(root):
    """Map every leaf name to the folders above it.

    The folder names are joined with "/" starting at the leaf's direct parent and walking up; the root itself is not
    part of the path. Leaves directly below the root map to "".

    Parameters:
    -----------
    root : HierarchyItem or None
        Root of the tree

    Returns:
    --------
    paths : dict
        Leaf name -> path. Empty when no tree is given.
    """
    paths = {}
    if root is None:
        return paths

    for leaf in iter_leaves(root):
        parents = []
        current = leaf.parent
        while current is not None and current is not root:
            parents.append(current.name)
            current = current.parent
        paths.setdefault(leaf.name, "/".join(parents))

    return paths
