"""
Sunrise / Sunset lookup
Fetches today's sunrise and sunset times for a coordinate from
https://api.sunrise-sunset.org, once with await and once with a callback.
"""

import asyncio
import sys
from typing import ClassVar, List, Optional, Tuple

from pydantic import BaseModel

from eazyrest import EazyRestClient, EazyRestError, EazyRestRequest, HttpMethod, Outcome


class SunTimes(BaseModel):
    sunrise: str
    sunset: str
    solar_noon: str
    day_length: str


class SunriseSunsetResponse(BaseModel):
    results: SunTimes
    status: str


class GetSunriseSunsetRequest(EazyRestRequest[SunriseSunsetResponse]):
    method: ClassVar[HttpMethod] = HttpMethod.GET
    resource_path: ClassVar[str] = "json"

    latitude: float
    longitude: float
    tzid: str

    @property
    def query_parameters(self) -> Optional[List[Tuple[str, str]]]:
        return [
            ("lat", str(self.latitude)),
            ("lng", str(self.longitude)),
            ("tzid", self.tzid),
        ]


def print_times(response: SunriseSunsetResponse) -> None:
    print(f"Sunrise: {response.results.sunrise}")
    print(f"Sunset:  {response.results.sunset}")
    print(f"Day length: {response.results.day_length}")


async def main(latitude: float, longitude: float, tzid: str) -> None:
    request = GetSunriseSunsetRequest(latitude=latitude, longitude=longitude, tzid=tzid)

    async with EazyRestClient("https://api.sunrise-sunset.org/") as client:
        try:
            print_times(await client.send_async(request))
        except EazyRestError as e:
            print(f"Request failed: {e}")

        done = asyncio.Event()

        def on_complete(outcome: Outcome[SunriseSunsetResponse]) -> None:
            if outcome.ok:
                print_times(outcome.unwrap())
            else:
                print(f"Request failed: {outcome.error}")
            done.set()

        client.send(request, on_complete)
        await done.wait()


if __name__ == "__main__":
    lat, lng, zone = 45.5017, -73.5673, "America/Toronto"
    if len(sys.argv) == 4:
        lat, lng, zone = float(sys.argv[1]), float(sys.argv[2]), sys.argv[3]
    asyncio.run(main(lat, lng, zone))
