"""
Component tree tests: construction, cloning, cost and mass aggregation.
"""
import dataclasses

import numpy as np
import pytest

from aircraftdesign.components import UNASSIGNED_ID, Component, System, clone
from aircraftdesign.errors import ArityMismatch, InvalidDimension, UnitMismatch
from aircraftdesign.objects import ObjectPoint, ObjectVol
from aircraftdesign.shapes import ShapeCuboid, ShapeCyl, ShapePoint
from aircraftdesign.utils.orientation import rotation_matrix


class TestComponent:
    def test_defaults(self, unit_box_leaf):
        assert unit_box_leaf.id == UNASSIGNED_ID == -1
        np.testing.assert_array_equal(unit_box_leaf.O, np.zeros(3))
        np.testing.assert_array_equal(unit_box_leaf.Oaxis, np.eye(3))
        assert unit_box_leaf.comments == ""
        assert len(unit_box_leaf) == 1
        assert unit_box_leaf.children() == ()

    def test_mass_properties(self, unit_box_leaf):
        assert unit_box_leaf.mass() == 1000.0
        assert unit_box_leaf.mass_units() == "kg"
        np.testing.assert_allclose(unit_box_leaf.cg(), [0.5, 0.5, 0.5])
        assert unit_box_leaf.cg_units() == "m"

    def test_requires_object(self):
        with pytest.raises(TypeError):
            Component("bad", ShapeCuboid(1.0, 1.0, 1.0))

    def test_negative_cost_rejected(self):
        with pytest.raises(InvalidDimension):
            Component("bad", ObjectPoint(ShapePoint(), 1.0), cost=-5.0)

    def test_string_cost_rejected(self):
        with pytest.raises(InvalidDimension):
            Component("bad", ObjectPoint(ShapePoint(), 1.0), cost="12.50")

    def test_string_density_rejected(self):
        with pytest.raises(InvalidDimension):
            ObjectVol(ShapeCuboid(1.0, 1.0, 1.0), "1000")

    @pytest.mark.parametrize("kwargs", [
        {"O": [0.0, 1.0]},
        {"Oaxis": np.eye(2)},
        {"O": [0.0, np.nan, 0.0]},
    ])
    def test_bad_frame_rejected(self, kwargs):
        with pytest.raises(InvalidDimension):
            Component("bad", ObjectPoint(ShapePoint(), 1.0), **kwargs)

    def test_is_immutable(self, unit_box_leaf):
        with pytest.raises(dataclasses.FrozenInstanceError):
            unit_box_leaf.cost = 10.0
        # Frame arrays are read-only
        with pytest.raises(ValueError):
            unit_box_leaf.O[0] = 1.0

    def test_frame_is_copied(self):
        O = np.array([1.0, 2.0, 3.0])
        leaf = Component("c", ObjectPoint(ShapePoint(), 1.0), O=O)
        O[0] = 100.0
        np.testing.assert_array_equal(leaf.O, [1.0, 2.0, 3.0])


class TestSystem:
    def test_cost_is_sum_of_children(self, wing):
        assert wing.cost == 350.0
        assert len(wing) == 2
        assert [c.name for c in wing.children()] == ["child1", "child2"]

    def test_cost_recursive(self, leaf_factory):
        inner = System("inner", [leaf_factory("a", 1.0), leaf_factory("b", 2.0)])
        outer = System("outer", [inner, leaf_factory("c", 4.0)])
        top = System("top", [outer, leaf_factory("d", 8.0)])

        assert inner.cost == 3.0
        assert outer.cost == 7.0
        assert top.cost == 15.0
        for _, node in top.walk():
            if node.children():
                assert node.cost == sum(c.cost for c in node.children())

    def test_default_frames(self, leaf_factory):
        system = System("s", [leaf_factory("a"), leaf_factory("b")])
        assert len(system.subO) == len(system.subOaxis) == 2
        for o, axis in zip(system.subO, system.subOaxis):
            np.testing.assert_array_equal(o, np.zeros(3))
            np.testing.assert_array_equal(axis, np.eye(3))

    def test_empty_system(self):
        system = System("empty", [])
        assert system.cost == 0
        assert system.mass() == 0
        assert len(system) == 0
        np.testing.assert_array_equal(system.cg(), np.zeros(3))
        assert system.mass_units() == "kg"

    @pytest.mark.parametrize("n_O, n_Oaxis", [(1, 2), (2, 1), (3, 2), (2, 3), (0, 2)])
    def test_arity_mismatch(self, leaf_factory, n_O, n_Oaxis):
        with pytest.raises(ArityMismatch):
            System(
                "s",
                [leaf_factory("a"), leaf_factory("b")],
                subO=[np.zeros(3)] * n_O,
                subOaxis=[np.eye(3)] * n_Oaxis,
            )

    def test_arity_match_accepted(self, leaf_factory):
        system = System(
            "s",
            [leaf_factory("a"), leaf_factory("b")],
            subO=[[0, 0, 0], [1, 0, 0]],
            subOaxis=[np.eye(3), rotation_matrix(0, 0, 45)],
        )
        np.testing.assert_array_equal(system.subO[1], [1.0, 0.0, 0.0])

    def test_only_origins_given(self, leaf_factory):
        with pytest.raises(ArityMismatch):
            System("s", [leaf_factory("a"), leaf_factory("b")], subO=[[0, 0, 0]])

    def test_shared_child_rejected(self, leaf_factory):
        leaf = leaf_factory("a")
        with pytest.raises(ValueError, match="more than once"):
            System("s", [leaf, leaf])

    def test_shared_grandchild_rejected(self, leaf_factory):
        leaf = leaf_factory("a")
        inner = System("inner", [leaf])
        with pytest.raises(ValueError, match="more than once"):
            System("outer", [inner, leaf])

    def test_children_must_be_components(self):
        with pytest.raises(TypeError):
            System("s", [ObjectPoint(ShapePoint(), 1.0)])

    def test_mass_and_cg(self, wing):
        # 2 kg at origin, 6 kg at x=4
        assert wing.mass() == 8.0
        np.testing.assert_allclose(wing.cg(), [3.0, 0.0, 0.0])
        assert wing.mass_units() == "kg"
        assert wing.cg_units() == "m"

    def test_cg_uses_child_orientation(self):
        # Cylinder axis (local z) pitched onto the parent x axis
        tube = Component("tube", ObjectVol(ShapeCyl(0.1, 2.0), 1.0))
        system = System(
            "s", [tube],
            subO=[[0.0, 0.0, 5.0]],
            subOaxis=[rotation_matrix(0, 90, 0)],
        )
        np.testing.assert_allclose(system.cg(), [1.0, 0.0, 5.0], atol=1e-12)

    def test_nested_cg(self, leaf_factory):
        inner = System("inner", [leaf_factory("a", mass=1.0)], subO=[[1.0, 0.0, 0.0]])
        outer = System("outer", [inner], subO=[[0.0, 2.0, 0.0]])
        np.testing.assert_allclose(outer.cg(), [1.0, 2.0, 0.0])

    def test_mixed_units_rejected(self):
        kg = Component("kg", ObjectPoint(ShapePoint(), 1.0))
        lb = Component("lb", ObjectPoint(ShapePoint(), 1.0, "lb"))
        system = System("s", [kg, lb])
        assert system.mass() == 2.0
        with pytest.raises(UnitMismatch):
            system.mass_units()

    def test_walk_is_preorder(self, leaf_factory):
        inner = System("inner", [leaf_factory("a"), leaf_factory("b")])
        top = System("top", [inner, leaf_factory("c")])
        visited = [(path, node.name) for path, node in top.walk()]
        assert visited == [
            ((), "top"),
            ((0,), "inner"),
            ((0, 0), "a"),
            ((0, 1), "b"),
            ((1,), "c"),
        ]

    def test_summary(self, wing):
        text = wing.summary()
        assert "wing" in text
        assert "child2" in text
        assert len(text.splitlines()) == 3


class TestClone:
    def test_clone_identical(self, unit_box_leaf):
        copy = clone(unit_box_leaf)
        assert copy is not unit_box_leaf
        assert copy.name == unit_box_leaf.name
        assert copy.cost == unit_box_leaf.cost
        assert copy.id == unit_box_leaf.id
        assert copy.description == unit_box_leaf.description
        assert copy.vendor == unit_box_leaf.vendor
        assert copy.subcomponents is unit_box_leaf.subcomponents
        np.testing.assert_array_equal(copy.O, unit_box_leaf.O)
        np.testing.assert_array_equal(copy.Oaxis, unit_box_leaf.Oaxis)

    def test_clone_origin_only(self, unit_box_leaf):
        moved = unit_box_leaf.clone([1.0, 2.0, 3.0])
        np.testing.assert_array_equal(moved.O, [1.0, 2.0, 3.0])
        np.testing.assert_array_equal(moved.Oaxis, np.eye(3))
        # Original untouched
        np.testing.assert_array_equal(unit_box_leaf.O, np.zeros(3))

    def test_clone_orientation_only(self, unit_box_leaf):
        R = rotation_matrix(0, 0, 90)
        rotated = unit_box_leaf.clone(R)
        np.testing.assert_allclose(rotated.Oaxis, R)
        np.testing.assert_array_equal(rotated.O, np.zeros(3))

        rotated_kw = clone(unit_box_leaf, Oaxis=R)
        np.testing.assert_allclose(rotated_kw.Oaxis, R)

    def test_clone_both(self, unit_box_leaf):
        R = rotation_matrix(10, 20, 30)
        copy = clone(unit_box_leaf, [0.0, 0.0, 1.0], R)
        np.testing.assert_array_equal(copy.O, [0.0, 0.0, 1.0])
        np.testing.assert_allclose(copy.Oaxis, R)

    def test_clone_system(self, wing):
        copy = wing.clone([0.0, 5.0, 0.0])
        assert copy.name == wing.name
        assert copy.cost == wing.cost
        assert [c.name for c in copy.children()] == ["child1", "child2"]
        # Children are copies, never shared with the original
        for a, b in zip(copy.children(), wing.children()):
            assert a is not b
        np.testing.assert_array_equal(copy.subO[1], wing.subO[1])
        np.testing.assert_array_equal(copy.O, [0.0, 5.0, 0.0])

    def test_clone_can_join_original(self, wing):
        pair = System("wings", [wing, wing.clone()], subO=[[0, 1, 0], [0, -1, 0]])
        assert pair.cost == 700.0
