"""Demo scenario: a planner territory with customers, claims and a calendar."""

import logging
import random
from datetime import date

from danji_care.generators import AccidentGenerator, CustomerGenerator, ScheduleEventGenerator
from danji_care.geo.directory import GeoDirectory
from danji_care.store.repositories import (
    AccidentRepository,
    CustomerRepository,
    ScheduleEventRepository,
)

logger = logging.getLogger(__name__)


class DemoScenario:
    """Populate the local stores with a coherent demo territory.

    Every complex in the directory becomes a customer joined by
    ``apartment_id``; requests and calendar notes reference those names.
    """

    def __init__(
        self,
        directory: GeoDirectory | None = None,
        num_accidents: int = 12,
        num_events: int = 8,
        seed: int | None = None,
    ) -> None:
        """Initialize demo scenario.

        Parameters
        ----------
        directory : GeoDirectory | None
            Apartments to build the territory from.
        num_accidents : int
            Number of client requests to generate.
        num_events : int
            Number of calendar notes to generate.
        seed : int | None
            Random seed for reproducibility.
        """
        self.directory = directory or GeoDirectory()
        self.num_accidents = num_accidents
        self.num_events = num_events
        self.seed = seed

        if seed is not None:
            random.seed(seed)

        self._customer_gen = CustomerGenerator(seed=seed)
        self._accident_gen = AccidentGenerator(seed=seed)
        self._event_gen = ScheduleEventGenerator(seed=seed)

    def populate(
        self,
        customers: CustomerRepository,
        accidents: AccidentRepository,
        events: ScheduleEventRepository,
        today: date | None = None,
    ) -> dict[str, int]:
        """Overwrite the three stores with generated data.

        Returns
        -------
        dict[str, int]
            Record counts per store.
        """
        today = today or date.today()
        generated_customers = list(self._customer_gen.generate_for_directory(self.directory))
        names = [c.name for c in generated_customers]

        generated_accidents = sorted(
            self._accident_gen.generate_batch(names, self.num_accidents),
            key=lambda a: a.date,
            reverse=True,
        )
        generated_events = list(self._event_gen.generate_batch(today, names, self.num_events))

        customers.save(generated_customers)
        accidents.save(generated_accidents)
        events.save(generated_events)

        summary = {
            "customers": len(generated_customers),
            "accidents": len(generated_accidents),
            "schedule_events": len(generated_events),
        }
        logger.info(
            "Populated demo territory: %d customers, %d accidents, %d events",
            summary["customers"],
            summary["accidents"],
            summary["schedule_events"],
        )
        return summary
