"""
AbTesting API.

Experiment management and reports for the premium A/B Testing plugin.
Variations, targets and success metrics are lists of mappings and are
sent in PHP array notation (``variations[0][name]=...``).
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from matomo_client.modules.base import Flag, ModuleBase, SiteId

ExperimentId = Union[int, str]
Records = Sequence[Dict[str, Any]]


class AbTestingModule(ModuleBase):
    """Façade for the ``AbTesting`` namespace."""

    namespace = "AbTesting"

    def _experiment(self, action: str, id_experiment: ExperimentId, id_site: SiteId):
        return self._call(action, {"idExperiment": id_experiment, "idSite": id_site})

    def get_metrics_overview(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        id_experiment: ExperimentId,
        segment: str = "",
    ):
        """Get the overview of all metrics for an experiment."""
        return self._call(
            "getMetricsOverview",
            {"idSite": id_site, "period": period, "date": date, "idExperiment": id_experiment},
            {"segment": segment},
        )

    def get_metric_details(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        id_experiment: ExperimentId,
        success_metric: str,
        segment: str = "",
    ):
        """Get per-variation details for one success metric."""
        return self._call(
            "getMetricDetails",
            {
                "idSite": id_site,
                "period": period,
                "date": date,
                "idExperiment": id_experiment,
                "successMetric": success_metric,
            },
            {"segment": segment},
        )

    def add_experiment(
        self,
        id_site: SiteId,
        name: str,
        hypothesis: str,
        description: str,
        variations: Records,
        included_targets: Records,
        success_metrics: Records,
    ):
        """
        Create an experiment.

        Args:
            variations: e.g. ``[{"name": "Green button"}]``
            included_targets: e.g. ``[{"attribute": "url", "type": "any", "value": "", "inverted": "0"}]``
            success_metrics: e.g. ``[{"metric": "nb_conversions"}]``
        """
        return self._call(
            "addExperiment",
            {
                "idSite": id_site,
                "name": name,
                "hypothesis": hypothesis,
                "description": description,
                "variations": list(variations),
                "includedTargets": list(included_targets),
                "successMetrics": list(success_metrics),
            },
        )

    def update_experiment(
        self,
        id_experiment: ExperimentId,
        id_site: SiteId,
        name: str,
        description: str,
        hypothesis: str,
        variations: Records,
        confidence_threshold: Union[int, float],
        mde_relative: Union[int, float],
        percentage_participants: Union[int, float],
        success_metrics: Records,
        included_targets: Records,
        excluded_targets: Optional[Records] = None,
        start_date: str = "",
        end_date: str = "",
        forward_utm_params: Flag = None,
        forward_all_query_params: Flag = None,
    ):
        return self._call(
            "updateExperiment",
            {
                "idExperiment": id_experiment,
                "idSite": id_site,
                "name": name,
                "description": description,
                "hypothesis": hypothesis,
                "variations": list(variations),
                "confidenceThreshold": confidence_threshold,
                "mdeRelative": mde_relative,
                "percentageParticipants": percentage_participants,
                "successMetrics": list(success_metrics),
                "includedTargets": list(included_targets),
            },
            {
                "excludedTargets": list(excluded_targets) if excluded_targets else None,
                "startDate": start_date,
                "endDate": end_date,
                "forwardUtmParams": forward_utm_params,
                "forwardAllQueryParams": forward_all_query_params,
            },
        )

    def start_experiment(self, id_experiment: ExperimentId, id_site: SiteId):
        return self._experiment("startExperiment", id_experiment, id_site)

    def finish_experiment(self, id_experiment: ExperimentId, id_site: SiteId):
        return self._experiment("finishExperiment", id_experiment, id_site)

    def archive_experiment(self, id_experiment: ExperimentId, id_site: SiteId):
        return self._experiment("archiveExperiment", id_experiment, id_site)

    def get_js_include_template(self):
        """Get the JavaScript snippet that loads the experiments framework."""
        return self._call("getJsIncludeTemplate")

    def get_js_experiment_template(self, id_experiment: ExperimentId, id_site: SiteId):
        """Get the JavaScript code that runs one experiment on the page."""
        return self._experiment("getJsExperimentTemplate", id_experiment, id_site)

    def get_all_experiments(self, id_site: SiteId):
        return self._call("getAllExperiments", {"idSite": id_site})

    def get_active_experiments(self, id_site: SiteId):
        return self._call("getActiveExperiments", {"idSite": id_site})

    def get_experiments_by_statuses(self, id_site: SiteId, statuses: List[str]):
        """Get experiments in any of the given statuses (created, running, finished, archived)."""
        return self._call(
            "getExperimentsByStatuses", {"idSite": id_site, "statuses": list(statuses)}
        )

    def get_experiment(self, id_experiment: ExperimentId, id_site: SiteId):
        return self._experiment("getExperiment", id_experiment, id_site)

    def delete_experiment(self, id_experiment: ExperimentId, id_site: SiteId):
        return self._experiment("deleteExperiment", id_experiment, id_site)

    def get_available_statuses(self, id_site: SiteId):
        return self._call("getAvailableStatuses", {"idSite": id_site})

    def get_available_success_metrics(self, id_site: SiteId):
        return self._call("getAvailableSuccessMetrics", {"idSite": id_site})

    def get_available_target_attributes(self):
        return self._call("getAvailableTargetAttributes")

    def get_experiments_with_reports(self, id_site: SiteId):
        return self._call("getExperimentsWithReports", {"idSite": id_site})
