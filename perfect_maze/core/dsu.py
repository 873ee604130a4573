from array import array

class DSU:
    """
    Disjoint Set Union over elements 0..n-1.

    Merges are small-to-large (a root's `size` is the size of its set) and
    find() compresses the walked path onto the root, so lookups amortize to
    near-constant time. find() is iterative to stay clear of the recursion
    limit on large grids.
    """

    __slots__ = ('n', 'parent', 'size', 'set_count')

    def __init__(self, n: int):
        self.n = n
        # 'l' (signed long) -> plenty for width * height of any practical maze
        self.parent = array('l', range(n))
        self.size = array('l', [1] * n)
        self.set_count = n

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        # Path compression: point every node on the walk directly at root
        while self.parent[x] != root:
            nxt = self.parent[x]
            self.parent[x] = root
            x = nxt

        return root

    def same_set(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def set_size(self, x: int) -> int:
        return self.size[self.find(x)]

    def merge(self, a: int, b: int) -> bool:
        """
        Joins the sets of a and b.
        Returns False (no change) if they were already joined.
        On equal sizes, a's root goes under b's root.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.size[root_a] > self.size[root_b]:
            self.size[root_a] += self.size[root_b]
            self.parent[root_b] = root_a
        else:
            self.size[root_b] += self.size[root_a]
            self.parent[root_a] = root_b

        self.set_count -= 1
        return True
