"""Tests for attribute helpers."""

import xml.etree.ElementTree as ET

from svgraster.svg.attributes import local_name, node_attributes, parse_number, parse_points
from svgraster.utils.geometry import Point


def test_local_name():
    assert local_name("{http://www.w3.org/2000/svg}rect") == "rect"
    assert local_name("rect") == "rect"


def test_node_attributes_strips_namespaces():
    node = ET.fromstring(
        '<use xmlns:xlink="http://www.w3.org/1999/xlink" xlink:href="#a" id="u"/>'
    )
    attrs = node_attributes(node)
    assert attrs["href"] == "#a"
    assert attrs["id"] == "u"


def test_plain_href_wins_over_xlink():
    node = ET.fromstring(
        '<use xmlns:xlink="http://www.w3.org/1999/xlink" xlink:href="#old" href="#new"/>'
    )
    assert node_attributes(node)["href"] == "#new"


def test_parse_number():
    assert parse_number("12") == 12
    assert parse_number(" 7 ") == 7
    assert parse_number("2.5") == 3
    assert parse_number("-2.5") == -3
    assert parse_number("10px") == 10
    assert parse_number(None) == 0
    assert parse_number("abc") == 0


def test_parse_points():
    assert parse_points("0,0 10,5 -3,4") == [Point(0, 0), Point(10, 5), Point(-3, 4)]
    assert parse_points("0 0, 10 5") == [Point(0, 0), Point(10, 5)]
    assert parse_points("  1,2\n3,4  ") == [Point(1, 2), Point(3, 4)]


def test_parse_points_stops_at_first_bad_pair():
    assert parse_points("0,0 1,1 x,2 3,3") == [Point(0, 0), Point(1, 1)]
    # dangling coordinate is not a pair
    assert parse_points("0,0 1,1 5") == [Point(0, 0), Point(1, 1)]
    assert parse_points("") == []
    assert parse_points(None) == []
