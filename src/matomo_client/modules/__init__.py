"""
Per-namespace façades.

Each module wraps one Matomo API namespace. ModulesMixin attaches every
façade to an object under a snake_case attribute, bound to a dispatcher.
"""

from matomo_client.dispatch.interface import Dispatcher
from matomo_client.modules.ab_testing import AbTestingModule
from matomo_client.modules.actions import ActionsModule
from matomo_client.modules.activity_log import ActivityLogModule
from matomo_client.modules.advertising_conversion_export import AdvertisingConversionExportModule
from matomo_client.modules.annotations import AnnotationsModule
from matomo_client.modules.api import ApiModule
from matomo_client.modules.base import ModuleBase
from matomo_client.modules.connect_accounts import ConnectAccountsModule
from matomo_client.modules.contents import ContentsModule
from matomo_client.modules.core_admin_home import CoreAdminHomeModule
from matomo_client.modules.crash_analytics import CrashAnalyticsModule
from matomo_client.modules.custom_alerts import CustomAlertsModule
from matomo_client.modules.custom_dimensions import CustomDimensionsModule
from matomo_client.modules.custom_js_tracker import CustomJsTrackerModule
from matomo_client.modules.custom_reports import CustomReportsModule
from matomo_client.modules.custom_variables import CustomVariablesModule
from matomo_client.modules.dashboard import DashboardModule
from matomo_client.modules.device_plugins import DevicePluginsModule
from matomo_client.modules.devices_detection import DevicesDetectionModule
from matomo_client.modules.events import EventsModule
from matomo_client.modules.feedback import FeedbackModule
from matomo_client.modules.form_analytics import FormAnalyticsModule
from matomo_client.modules.funnels import FunnelsModule
from matomo_client.modules.goals import GoalsModule
from matomo_client.modules.heatmap_session_recording import HeatmapSessionRecordingModule
from matomo_client.modules.image_graph import ImageGraphModule
from matomo_client.modules.insights import InsightsModule
from matomo_client.modules.languages_manager import LanguagesManagerModule
from matomo_client.modules.live import LiveModule
from matomo_client.modules.login import LoginModule
from matomo_client.modules.marketing_campaigns_reporting import MarketingCampaignsReportingModule
from matomo_client.modules.media_analytics import MediaAnalyticsModule
from matomo_client.modules.mobile_messaging import MobileMessagingModule
from matomo_client.modules.multi_channel_conversion_attribution import MultiChannelConversionAttributionModule
from matomo_client.modules.multi_sites import MultiSitesModule
from matomo_client.modules.overlay import OverlayModule
from matomo_client.modules.page_performance import PagePerformanceModule
from matomo_client.modules.privacy_manager import PrivacyManagerModule
from matomo_client.modules.referrers import ReferrersModule
from matomo_client.modules.resolution import ResolutionModule
from matomo_client.modules.roll_up_reporting import RollUpReportingModule
from matomo_client.modules.scheduled_reports import ScheduledReportsModule
from matomo_client.modules.search_engine_keywords_performance import SearchEngineKeywordsPerformanceModule
from matomo_client.modules.segment_editor import SegmentEditorModule
from matomo_client.modules.seo import SeoModule
from matomo_client.modules.sites_manager import SitesManagerModule
from matomo_client.modules.tag_manager import TagManagerModule
from matomo_client.modules.tour import TourModule
from matomo_client.modules.transitions import TransitionsModule
from matomo_client.modules.two_factor_auth import TwoFactorAuthModule
from matomo_client.modules.user_country import UserCountryModule
from matomo_client.modules.user_id import UserIdModule
from matomo_client.modules.user_language import UserLanguageModule
from matomo_client.modules.users_flow import UsersFlowModule
from matomo_client.modules.users_manager import UsersManagerModule
from matomo_client.modules.visit_frequency import VisitFrequencyModule
from matomo_client.modules.visit_time import VisitTimeModule
from matomo_client.modules.visitor_interest import VisitorInterestModule
from matomo_client.modules.visits_summary import VisitsSummaryModule

# Attribute name -> façade class
MODULES = {
    "api": ApiModule,
    "ab_testing": AbTestingModule,
    "actions": ActionsModule,
    "activity_log": ActivityLogModule,
    "advertising_conversion_export": AdvertisingConversionExportModule,
    "annotations": AnnotationsModule,
    "connect_accounts": ConnectAccountsModule,
    "contents": ContentsModule,
    "core_admin_home": CoreAdminHomeModule,
    "crash_analytics": CrashAnalyticsModule,
    "custom_alerts": CustomAlertsModule,
    "custom_dimensions": CustomDimensionsModule,
    "custom_js_tracker": CustomJsTrackerModule,
    "custom_reports": CustomReportsModule,
    "custom_variables": CustomVariablesModule,
    "dashboard": DashboardModule,
    "device_plugins": DevicePluginsModule,
    "devices_detection": DevicesDetectionModule,
    "events": EventsModule,
    "feedback": FeedbackModule,
    "form_analytics": FormAnalyticsModule,
    "funnels": FunnelsModule,
    "goals": GoalsModule,
    "heatmap_session_recording": HeatmapSessionRecordingModule,
    "image_graph": ImageGraphModule,
    "insights": InsightsModule,
    "languages_manager": LanguagesManagerModule,
    "live": LiveModule,
    "login": LoginModule,
    "marketing_campaigns_reporting": MarketingCampaignsReportingModule,
    "media_analytics": MediaAnalyticsModule,
    "mobile_messaging": MobileMessagingModule,
    "multi_channel_conversion_attribution": MultiChannelConversionAttributionModule,
    "multi_sites": MultiSitesModule,
    "overlay": OverlayModule,
    "page_performance": PagePerformanceModule,
    "privacy_manager": PrivacyManagerModule,
    "referrers": ReferrersModule,
    "resolution": ResolutionModule,
    "roll_up_reporting": RollUpReportingModule,
    "scheduled_reports": ScheduledReportsModule,
    "search_engine_keywords_performance": SearchEngineKeywordsPerformanceModule,
    "segment_editor": SegmentEditorModule,
    "seo": SeoModule,
    "sites_manager": SitesManagerModule,
    "tag_manager": TagManagerModule,
    "tour": TourModule,
    "transitions": TransitionsModule,
    "two_factor_auth": TwoFactorAuthModule,
    "user_country": UserCountryModule,
    "user_id": UserIdModule,
    "user_language": UserLanguageModule,
    "users_flow": UsersFlowModule,
    "users_manager": UsersManagerModule,
    "visit_frequency": VisitFrequencyModule,
    "visit_time": VisitTimeModule,
    "visitor_interest": VisitorInterestModule,
    "visits_summary": VisitsSummaryModule,
}


class ModulesMixin:
    """Exposes every façade as an attribute bound to one dispatcher."""

    api: ApiModule
    ab_testing: AbTestingModule
    actions: ActionsModule
    activity_log: ActivityLogModule
    advertising_conversion_export: AdvertisingConversionExportModule
    annotations: AnnotationsModule
    connect_accounts: ConnectAccountsModule
    contents: ContentsModule
    core_admin_home: CoreAdminHomeModule
    crash_analytics: CrashAnalyticsModule
    custom_alerts: CustomAlertsModule
    custom_dimensions: CustomDimensionsModule
    custom_js_tracker: CustomJsTrackerModule
    custom_reports: CustomReportsModule
    custom_variables: CustomVariablesModule
    dashboard: DashboardModule
    device_plugins: DevicePluginsModule
    devices_detection: DevicesDetectionModule
    events: EventsModule
    feedback: FeedbackModule
    form_analytics: FormAnalyticsModule
    funnels: FunnelsModule
    goals: GoalsModule
    heatmap_session_recording: HeatmapSessionRecordingModule
    image_graph: ImageGraphModule
    insights: InsightsModule
    languages_manager: LanguagesManagerModule
    live: LiveModule
    login: LoginModule
    marketing_campaigns_reporting: MarketingCampaignsReportingModule
    media_analytics: MediaAnalyticsModule
    mobile_messaging: MobileMessagingModule
    multi_channel_conversion_attribution: MultiChannelConversionAttributionModule
    multi_sites: MultiSitesModule
    overlay: OverlayModule
    page_performance: PagePerformanceModule
    privacy_manager: PrivacyManagerModule
    referrers: ReferrersModule
    resolution: ResolutionModule
    roll_up_reporting: RollUpReportingModule
    scheduled_reports: ScheduledReportsModule
    search_engine_keywords_performance: SearchEngineKeywordsPerformanceModule
    segment_editor: SegmentEditorModule
    seo: SeoModule
    sites_manager: SitesManagerModule
    tag_manager: TagManagerModule
    tour: TourModule
    transitions: TransitionsModule
    two_factor_auth: TwoFactorAuthModule
    user_country: UserCountryModule
    user_id: UserIdModule
    user_language: UserLanguageModule
    users_flow: UsersFlowModule
    users_manager: UsersManagerModule
    visit_frequency: VisitFrequencyModule
    visit_time: VisitTimeModule
    visitor_interest: VisitorInterestModule
    visits_summary: VisitsSummaryModule

    def _init_modules(self, dispatcher: Dispatcher) -> None:
        for name, module_cls in MODULES.items():
            setattr(self, name, module_cls(dispatcher))


__all__ = ["MODULES", "ModuleBase", "ModulesMixin", *(cls.__name__ for cls in MODULES.values())]
