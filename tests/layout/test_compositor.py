"""Test the assembly of render plans."""

import pytest
from tinycss2.color4 import parse_color

from decobox import Measurement, MeasurementUnavailable
from decobox.config import resolve_config
from decobox.layout import compose_box, needs_measurement
from decobox.rect import Corners, Sides

from ..testing_utils import assert_no_logs, kinds

BOXED = {'title-style': {'boxed-style': {}}}


def boxed(anchor_y, **config):
    return resolve_config({
        'title-style': {'boxed-style': {'anchor': {'x': 'left', 'y': anchor_y}}},
        **config})


@assert_no_logs
def test_plain():
    plan = compose_box(resolve_config(), ['First'])
    assert kinds(plan) == ['outer', 'body', 'content', 'item']
    assert plan.reserved == 0
    assert plan.breakable is False
    body = plan.find('body')
    assert body.fill == parse_color('white')
    assert body.radii == Corners.uniform(5)
    assert body.breakable is False


@assert_no_logs
def test_title_band_and_footer():
    plan = compose_box(
        resolve_config(), ['First', 'Second'], title='Title', footer='Footer')
    assert kinds(plan) == [
        'outer', 'body', 'title', 'content', 'item', 'separator', 'item',
        'footer']
    title = plan.find('title')
    assert title.boxed is False
    assert title.placement is None
    assert title.radii == Corners(5, 5, 0, 0)
    footer = plan.find('footer')
    assert footer.radii == Corners(0, 0, 5, 5)
    assert footer.fill == parse_color('rgb(220 220 220)')


@assert_no_logs
def test_band_seams():
    config = resolve_config({
        'frame': {'thickness': 0},
        'title-style': {'sep-thickness': 2},
        'footer-style': {'sep-thickness': 3},
    })
    plan = compose_box(config, ['First'], title='Title', footer='Footer')
    title_strokes = plan.find('title').strokes
    assert tuple(stroke.thickness for stroke in title_strokes) == (0, 0, 2, 0)
    footer_strokes = plan.find('footer').strokes
    assert tuple(stroke.thickness for stroke in footer_strokes) == (3, 0, 0, 0)
    body_strokes = plan.find('body').strokes
    assert tuple(stroke.thickness for stroke in body_strokes) == (0, 0, 0, 0)


@assert_no_logs
def test_separators():
    config = resolve_config({'sep': {'thickness': 2, 'dash': 'dashed', 'gutter': 3}})
    plan = compose_box(config, ['First', 'Second', 'Third'])
    separators = plan.regions_of('separator')
    assert len(separators) == 2
    for separator in separators:
        assert separator.stroke.thickness == 2
        assert separator.stroke.dash == 'dashed'
        assert separator.stroke.paint == parse_color('black')
        assert separator.height == 8


@assert_no_logs
def test_empty_body():
    plan = compose_box(resolve_config(), [])
    assert kinds(plan) == ['outer', 'body', 'content']


@assert_no_logs
@pytest.mark.parametrize('config', ({}, BOXED, {'shadow': True}))
def test_empty_sections_suppressed(config):
    config = resolve_config(config)
    empty = compose_box(config, ['First'], title='', footer='')
    missing = compose_box(config, ['First'])
    assert kinds(empty) == kinds(missing)
    assert empty.find('title') is None
    assert empty.find('footer') is None
    assert empty.find('spacer') is None
    assert empty.reserved == missing.reserved == 0


@assert_no_logs
def test_boxed_horizon():
    config = boxed('horizon', frame={'inset': 10})
    plan = compose_box(config, ['First'], title='Hello', measurement=Measurement(50, 20))
    assert kinds(plan) == ['outer', 'spacer', 'body', 'content', 'item', 'title']
    assert plan.reserved == 10
    title = plan.find('title')
    assert title.boxed is True
    assert title.placement.dy == -10
    assert title.placement.overlay is True
    assert title.measurement == Measurement(50, 20)
    assert plan.find('body').overlay is title
    # Title is bisected by the top border
    assert plan.reserved + title.placement.dy == 0


@assert_no_logs
def test_boxed_top():
    plan = compose_box(
        boxed('top'), ['First'], title='Hello', measurement=Measurement(50, 20))
    assert plan.reserved == 20
    assert plan.find('title').placement.dy == -20


@assert_no_logs
def test_boxed_bottom():
    config = boxed('bottom', shadow={'offset': 4})
    plan = compose_box(
        config, ['First'], title='Hello', measurement=Measurement(50, 20))
    assert kinds(plan) == [
        'outer', 'shadow', 'body', 'content', 'title', 'item']
    assert plan.reserved == 0
    assert plan.find('body').overlay is None
    assert plan.find('shadow').outset == Sides(-4, 4, 4, -4)


@assert_no_logs
def test_boxed_radius():
    config = resolve_config({
        'title-style': {'boxed-style': {'radius': 2}}, 'frame': {'radius': 8}})
    plan = compose_box(config, ['First'], title='Hello', measurement=Measurement(50, 20))
    assert plan.find('title').radii == Corners.uniform(2)
    assert plan.find('body').radii == Corners.uniform(8)


@assert_no_logs
def test_boxed_shadow():
    config = boxed('horizon', frame={'inset': 10}, shadow={'offset': 4})
    plan = compose_box(config, ['First'], title='Hello', measurement=Measurement(50, 20))
    assert kinds(plan) == [
        'outer', 'shadow', 'spacer', 'body', 'content', 'item', 'shadow',
        'title']
    body_shadow, title_shadow = plan.regions_of('shadow')
    assert body_shadow.outset.top == -24
    assert body_shadow.fill == parse_color('rgb(200 200 200)')
    assert title_shadow.outset.bottom == -20.5
    assert title_shadow.children == (plan.find('title'),)
    assert plan.find('body').overlay is title_shadow


@assert_no_logs
def test_shadow_without_boxed_title():
    config = resolve_config({'shadow': {'offset': (2, 3)}})
    plan = compose_box(config, ['First'], title='Title')
    assert kinds(plan)[:3] == ['outer', 'shadow', 'body']
    assert plan.find('shadow').outset == Sides(-3, 2, 3, -2)


@assert_no_logs
def test_missing_measurement():
    with pytest.raises(MeasurementUnavailable):
        compose_box(resolve_config(BOXED), ['First'], title='Hello')


@assert_no_logs
def test_needs_measurement():
    assert needs_measurement(resolve_config(BOXED), 'Hello')
    assert not needs_measurement(resolve_config(BOXED), '')
    assert not needs_measurement(resolve_config(), 'Hello')


@assert_no_logs
def test_options_passed_through():
    plan = compose_box(
        resolve_config(), ['First'], width=200, align='center', breakable=True,
        spacing=4, above=1, below=2)
    root = plan.root
    assert (root.width, root.align) == (200, 'center')
    assert (root.spacing, root.above, root.below) == (4, 1, 2)
    assert plan.breakable is True
    assert plan.find('body').breakable is True


@assert_no_logs
def test_section_styles():
    config = resolve_config({
        'frame': {'inset': 4, 'footer-inset': 2},
        'body-style': {'align': 'right'},
        'footer-style': {'weight': 'bold'},
    }, font_size=12)
    plan = compose_box(config, ['First'], title='Title', footer='Footer')
    item = plan.find('item')
    assert item.style.align == 'right'
    assert item.style.font_size == 12
    assert plan.find('content').inset == Sides.uniform(4)
    footer = plan.find('footer')
    assert footer.inset == Sides.uniform(2)
    assert footer.style.weight == 700
    assert plan.find('title').style.color == parse_color('white')
