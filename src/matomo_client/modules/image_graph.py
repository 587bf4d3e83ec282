"""
ImageGraph API.

Renders any report as a static PNG graph. Supported graph types are
``evolution``, ``verticalBar``, ``horizontalBar``, ``pie`` and ``3dPie``.
"""

from typing import Optional, Union

from matomo_client.modules.base import Columns, Flag, ModuleBase, SiteId

Size = Optional[Union[int, str]]


class ImageGraphModule(ModuleBase):
    """Façade for the ``ImageGraph`` namespace."""

    namespace = "ImageGraph"

    def get(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        api_module: str,
        api_action: str,
        graph_type: str = "",
        output_type: Optional[str] = None,
        columns: Columns = "",
        labels: str = "",
        show_legend: Flag = None,
        width: Size = None,
        height: Size = None,
        font_size: Size = None,
        legend_font_size: Size = None,
        aliased_graph: Flag = None,
        id_goal="",
        colors: str = "",
        text_color: Optional[str] = None,
        background_color: Optional[str] = None,
        grid_color: Optional[str] = None,
        id_subtable="",
        legend_append_metric: Flag = None,
        segment: str = "",
        id_dimension="",
    ):
        """
        Get a graph image for a report.

        Arguments left at None fall back to the server defaults (output
        type 0, legend shown, font size 9, aliased graph, text color
        222222, background FFFFFF, grid CCCCCC, metric appended to legend).

        Args:
            api_module: Module of the report to plot, e.g. ``VisitsSummary``
            api_action: Action of the report to plot, e.g. ``get``
            graph_type: evolution, verticalBar, horizontalBar, pie or 3dPie
        """
        return self._report(
            "get",
            id_site,
            period,
            date,
            {
                "apiModule": api_module,
                "apiAction": api_action,
                "graphType": graph_type,
                "outputType": output_type,
                "columns": columns,
                "labels": labels,
                "showLegend": show_legend,
                "width": width,
                "height": height,
                "fontSize": font_size,
                "legendFontSize": legend_font_size,
                "aliasedGraph": aliased_graph,
                "idGoal": id_goal,
                "colors": colors,
                "textColor": text_color,
                "backgroundColor": background_color,
                "gridColor": grid_color,
                "idSubtable": id_subtable,
                "legendAppendMetric": legend_append_metric,
                "segment": segment,
                "idDimension": id_dimension,
            },
        )
