"""
UserCountry API.

Visitor geolocation reports and location provider settings.
"""

from matomo_client.modules.base import ModuleBase, SiteId


class UserCountryModule(ModuleBase):
    """Façade for the ``UserCountry`` namespace."""

    namespace = "UserCountry"

    def get_country(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getCountry", id_site, period, date, {"segment": segment})

    def get_continent(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getContinent", id_site, period, date, {"segment": segment})

    def get_region(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getRegion", id_site, period, date, {"segment": segment})

    def get_city(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getCity", id_site, period, date, {"segment": segment})

    def get_country_code_mapping(self):
        """Get the mapping of country codes to country names."""
        return self._call("getCountryCodeMapping")

    def get_location_from_ip(self, ip: str = "", provider: str = ""):
        """
        Resolve the location of an IP address.

        Args:
            ip: IP to look up; the caller's IP when empty
            provider: Location provider ID; the configured provider when empty
        """
        return self._call("getLocationFromIP", optional={"ip": ip, "provider": provider})

    def set_location_provider(self, provider_id: str):
        return self._call("setLocationProvider", {"providerId": provider_id})

    def get_number_of_distinct_countries(
        self, id_site: SiteId, period: str, date: str, segment: str = ""
    ):
        return self._report(
            "getNumberOfDistinctCountries", id_site, period, date, {"segment": segment}
        )
