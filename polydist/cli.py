import json
import logging

import click

from polydist.data.annotations import (
    dump_records,
    load_annotation_set,
    polygon_groups_from_annotations,
    query_points_from_annotations,
    record_to_dict,
)
from polydist.exceptions import AnnotationFormatException, InvalidUnitScaleException
from polydist.logging import configure_logging
from polydist.measure import check_groups, measure_all_groups
from polydist.settings import settings

log = logging.getLogger('polydist')


@click.group(name="polydist", help="Measure distances from annotated points to the nearest polygon boundary.")
def polydist():
    pass


@polydist.command()
@click.argument('annotations', type=click.Path(exists=True, dir_okay=False))
@click.option('--query-class', default=None, help=f'Class label of the query annotations [default: {settings.query_class}]')
@click.option('--group', 'groups', multiple=True, help='Boundary class label, repeatable [default: endo, epi]')
@click.option('--pixel-size', type=float, default=None, help='Physical size of one pixel, overrides the file')
@click.option('--unit', default=None, help=f'Physical unit name [default: {settings.unit}]')
@click.option('--output', type=click.Path(dir_okay=False), default=None, help='Write records to this JSON file')
@click.option('--plot', type=click.Path(dir_okay=False), default=None, help='Render an overlay to this image file')
@click.option('--image', type=click.Path(exists=True, dir_okay=False), default=None, help='Background image for --plot')
@click.option('--log-level', default=None, help='DEBUG, INFO, WARNING or ERROR')
def measure(annotations, query_class, groups, pixel_size, unit, output, plot, image, log_level):
    """Measure distances for every query annotation to each boundary class."""
    configure_logging(level=log_level or settings.log_level)
    query_class = query_class or settings.query_class
    labels = list(groups) if groups else list(settings.boundary_classes)
    unit_given = unit is not None
    unit = unit or settings.unit

    try:
        annotation_set = load_annotation_set(annotations)
    except AnnotationFormatException as e:
        raise click.ClickException(str(e))

    unit_scale = pixel_size if pixel_size is not None else annotation_set.pixelSizeMicrons
    if unit_scale is None:
        unit_scale = settings.default_unit_scale
        if not unit_given:
            unit = "px"
        log.warning("No pixel size available, using %s %s per pixel", unit_scale, unit)

    points = query_points_from_annotations(annotation_set.annotations, query_class)
    polygon_groups = polygon_groups_from_annotations(annotation_set.annotations, labels)
    if not check_groups(points, polygon_groups):
        raise click.ClickException("nothing to measure")

    try:
        records = measure_all_groups(points, polygon_groups, unit_scale)
    except InvalidUnitScaleException as e:
        raise click.ClickException(str(e))

    if output:
        dump_records(records, output, unit)
    else:
        click.echo(json.dumps([record_to_dict(r, unit) for r in records], indent=2, ensure_ascii=False))

    if plot:
        _render(plot, image, polygon_groups, records, unit)
    log.info("Distance measurement complete for %d points", len(points))


def _render(path, image, polygon_groups, records, unit):
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt

    from polydist.visualize import DistancePlot

    fig, axes = plt.subplots()
    if image:
        axes.imshow(plt.imread(image))
    else:
        axes.invert_yaxis()
        axes.set_aspect('equal')
    plot = DistancePlot(axes, unit=unit)
    plot.polygons(polygon_groups)
    plot.records(records)
    axes.autoscale_view()
    fig.savefig(path)
    plt.close(fig)


if __name__ == '__main__':
    polydist()
