"""Tests for the role seniority hierarchy."""

from rrbac.core.role import add_senior, new_role


class TestRoleNode:
    def test_add_senior_links_both_ways(self):
        junior = new_role("viewer")
        senior = new_role("editor")
        add_senior(junior, senior)
        assert junior.seniors == {senior}
        assert senior.juniors == {junior}
        assert junior.juniors == set()
        assert senior.seniors == set()

    def test_add_senior_twice_is_single_edge(self):
        junior, senior = new_role("j"), new_role("s")
        add_senior(junior, senior)
        add_senior(junior, senior)
        assert len(junior.seniors) == 1
        assert len(senior.juniors) == 1

    def test_repr(self):
        assert repr(new_role("admin")) == "RoleNode('admin')"


class TestAncestorClosure:
    def test_isolated_role_has_empty_closure(self):
        assert new_role("r").ancestor_closure() == set()

    def test_transitive(self):
        viewer, editor, admin = new_role("viewer"), new_role("editor"), new_role("admin")
        add_senior(viewer, editor)
        add_senior(editor, admin)
        assert viewer.ancestor_closure() == {editor, admin}
        assert editor.ancestor_closure() == {admin}
        assert admin.ancestor_closure() == set()

    def test_multiple_seniors_diamond(self):
        base, left, right, top = (new_role(i) for i in ("base", "left", "right", "top"))
        add_senior(base, left)
        add_senior(base, right)
        add_senior(left, top)
        add_senior(right, top)
        assert base.ancestor_closure() == {left, right, top}

    def test_two_cycle_terminates(self):
        a, b = new_role("A"), new_role("B")
        add_senior(a, b)
        add_senior(b, a)
        assert a.ancestor_closure() == {a, b}
        assert b.ancestor_closure() == {a, b}

    def test_self_senior_terminates(self):
        r = new_role("r")
        add_senior(r, r)
        assert r.ancestor_closure() == {r}

    def test_longer_cycle_with_tail(self):
        tail, a, b, c = (new_role(i) for i in ("tail", "a", "b", "c"))
        add_senior(tail, a)
        add_senior(a, b)
        add_senior(b, c)
        add_senior(c, a)
        assert tail.ancestor_closure() == {a, b, c}
        assert tail not in a.ancestor_closure()

    def test_closure_is_deterministic(self):
        a, b, c = new_role("a"), new_role("b"), new_role("c")
        add_senior(a, b)
        add_senior(b, c)
        add_senior(c, a)
        assert a.ancestor_closure() == a.ancestor_closure()


class TestDescendantClosure:
    def test_juniors_transitive(self):
        viewer, editor, admin = new_role("viewer"), new_role("editor"), new_role("admin")
        add_senior(viewer, editor)
        add_senior(editor, admin)
        assert admin.descendant_closure() == {editor, viewer}
        assert viewer.descendant_closure() == set()

    def test_cycle_terminates(self):
        a, b = new_role("A"), new_role("B")
        add_senior(a, b)
        add_senior(b, a)
        assert a.descendant_closure() == {a, b}
