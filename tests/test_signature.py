"""Tests for dirdupes.signature — folding subtrees into signatures."""

from dirdupes.signature import ZERO, Signature, aggregate
from dirdupes.tree import Directory, File, Inaccessible


class TestSignature:
    """Test the signature value type."""

    def test_addition_is_fieldwise(self):
        assert Signature(1, 2, 3) + Signature(10, 20, 30) == Signature(11, 22, 33)

    def test_zero_is_identity(self):
        assert Signature(5, 1, 0) + ZERO == Signature(5, 1, 0)

    def test_describe(self):
        assert Signature(5000, 12, 1).describe() == "size = 5000, files = 12, dirs = 1"


class TestAggregate:
    """Test signature aggregation over trees."""

    def test_file(self):
        assert aggregate(File("a", 42)) == Signature(42, 1, 0)

    def test_inaccessible_is_zero(self):
        assert aggregate(Inaccessible("x")) == ZERO

    def test_empty_directory_counts_itself(self):
        assert aggregate(Directory("/d")) == Signature(0, 0, 1)

    def test_nested_directories(self):
        tree = Directory("/r", (
            File("a", 10),
            Directory("/r/s", (File("b", 5), File("c", 5), Directory("/r/s/t"))),
            Inaccessible("gone"),
        ))
        assert aggregate(tree) == Signature(20, 3, 3)

    def test_dir_count_is_one_plus_child_directories(self):
        children = (Directory("/r/a", (Directory("/r/a/b"),)), Directory("/r/c"), File("f", 1))
        tree = Directory("/r", children)
        expected = 1 + sum(aggregate(c).dir_count for c in children if isinstance(c, Directory))
        assert aggregate(tree).dir_count == expected == 4

    def test_inaccessible_contributes_nothing(self):
        plain = Directory("/r", (File("a", 7),))
        with_gaps = Directory("/r", (Inaccessible("x"), File("a", 7), Inaccessible("y")))
        assert aggregate(plain) == aggregate(with_gaps)

    def test_deeply_nested_directory(self):
        node = Directory("/leaf", (File("f", 5),))
        for i in range(2000):
            node = Directory(f"/d{i}", (node,))
        assert aggregate(node) == Signature(5, 1, 2001)
