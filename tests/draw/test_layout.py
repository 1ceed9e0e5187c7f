"""Test the vertical layout of render plans."""

import pytest

from decobox import Box
from decobox.draw import Frame, lay_out_plan

from ..testing_utils import assert_no_logs

SEP = {'thickness': 1, 'gutter': 2}


def lay_out(host, box, available_width=500):
    plan = box.layout(box.measure_title(host))
    return plan, lay_out_plan(plan, host.measure, 0, 0, available_width)


@assert_no_logs
def test_band_title(host):
    box = Box(
        {'frame': {'inset': 10}, 'sep': SEP}, 'First', 'Second',
        title='Title', footer='Footer', width='300pt', align='center')
    plan, frames = lay_out(host, box)
    assert frames[plan.root] == Frame(0, 0, 500, 79)
    assert frames[plan.find('body')] == Frame(100, 0, 300, 79)
    assert frames[plan.find('title')] == Frame(100, 0, 300, 16)
    assert frames[plan.find('content')] == Frame(100, 16, 300, 49)
    first, second = plan.regions_of('item')
    assert frames[first] == Frame(110, 26, 280, 12)
    assert frames[plan.find('separator')] == Frame(110, 38, 280, 5)
    assert frames[second] == Frame(110, 43, 280, 12)
    assert frames[plan.find('footer')] == Frame(100, 65, 300, 14)


@assert_no_logs
@pytest.mark.parametrize('align, x', (('left', 0), ('center', 50), ('right', 100)))
def test_align(host, align, x):
    box = Box(None, 'First', width='80%', align=align)
    plan, frames = lay_out(host, box)
    assert frames[plan.find('body')].x == x
    assert frames[plan.find('body')].width == 400


@assert_no_logs
def test_spacing(host):
    box = Box({'frame': {'inset': 0}}, 'First', spacing=5, below=1)
    plan, frames = lay_out(host, box)
    assert frames[plan.find('body')] == Frame(0, 5, 500, 12)
    assert frames[plan.root].height == 18


@assert_no_logs
def test_boxed_overlay(host):
    box = Box({
        'frame': {'inset': 10},
        'title-style': {'boxed-style': {'offset': {'x': 5}}},
        'shadow': {'offset': 4},
    }, 'First', title='Hello')
    plan, frames = lay_out(host, box)
    spacer = plan.find('spacer')
    body = plan.find('body')
    body_shadow, title_shadow = plan.regions_of('shadow')
    assert frames[spacer] == Frame(0, 0, 500, 10)
    assert frames[body] == Frame(0, 10, 500, 32)
    assert frames[body_shadow] == Frame(0, 0, 500, 42)
    assert frames[plan.find('title')] == Frame(5, 0, 50, 20)
    assert frames[title_shadow] == frames[plan.find('title')]
    assert frames[plan.root].height == 42


@assert_no_logs
def test_boxed_right(host):
    box = Box({
        'frame': {'inset': 10},
        'title-style': {'boxed-style': {
            'anchor': {'x': 'right', 'y': 'top'}, 'offset': {'x': 5}}},
    }, 'First', title='Hello')
    plan, frames = lay_out(host, box)
    assert frames[plan.find('title')] == Frame(445, 0, 50, 20)
    assert frames[plan.find('body')].y == 20


@assert_no_logs
def test_boxed_inline(host):
    box = Box({
        'frame': {'inset': 10},
        'title-style': {'boxed-style': {
            'anchor': {'y': 'bottom'}, 'offset': {'x': 5}}},
    }, 'First', title='Hello')
    plan, frames = lay_out(host, box)
    assert frames[plan.find('title')] == Frame(15, 10, 50, 20)
    assert frames[plan.find('item')] == Frame(10, 30, 480, 12)
    assert frames[plan.find('body')] == Frame(0, 0, 500, 52)
