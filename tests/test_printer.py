import io

from bintree.node import Node
from bintree.printer import print_tree, render


def _full_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _tree_height(node):
    if node is None:
        return -1
    return 1 + max(_tree_height(node.left), _tree_height(node.right))


def test_render_worked_example():
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)\n"
    )
    assert render(_full_tree()) == expected


def test_render_empty_tree():
    assert render(None) == ""


def test_render_single_node():
    assert render(Node(98)) == "(098)\n"


def test_line_count_is_height_plus_one():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.right.insert_left(128)
    root.insert_left(54)
    lines = render(root).splitlines()
    assert len(lines) == _tree_height(root) + 1


def test_labels_appear_on_their_level():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    lines = render(root).splitlines()
    assert "(098)" in lines[0]
    assert "(012)" in lines[1] and "(128)" in lines[1]
    assert "(054)" in lines[2] and "(402)" in lines[2]


def test_no_trailing_spaces():
    for line in render(_full_tree()).splitlines():
        assert line == line.rstrip(" ")


def test_print_tree_writes_render_output():
    buffer = io.StringIO()
    tree = _full_tree()
    print_tree(tree, buffer)
    assert buffer.getvalue() == render(tree)


def test_print_tree_to_stdout(capsys):
    tree = _full_tree()
    print_tree(tree)
    assert capsys.readouterr().out == render(tree)


def test_print_empty_tree_writes_nothing():
    buffer = io.StringIO()
    print_tree(None, buffer)
    assert buffer.getvalue() == ""