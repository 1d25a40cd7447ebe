"""Static vehicle collection served by the showcase."""

from __future__ import annotations

from decimal import Decimal

from vehicle_showcase.domain.vehicle import Vehicle

VEHICLES: tuple[Vehicle, ...] = (
    Vehicle(id="1", manufacturer="Toyota", model="Camry", type="Sedan", year=2022, price=Decimal("26420.00")),
    Vehicle(id="2", manufacturer="Honda", model="CR-V", type="SUV", year=2023, price=Decimal("29500.00")),
    Vehicle(id="3", manufacturer="Ford", model="F-150", type="Truck", year=2021, price=Decimal("33835.00")),
    Vehicle(id="4", manufacturer="Tesla", model="Model 3", type="Sedan", year=2023, price=Decimal("40240.00")),
    Vehicle(id="5", manufacturer="BMW", model="X5", type="SUV", year=2022, price=Decimal("61600.00")),
    Vehicle(id="6", manufacturer="Chevrolet", model="Silverado", type="Truck", year=2023, price=Decimal("36800.00")),
    Vehicle(id="7", manufacturer="Mazda", model="MX-5 Miata", type="Convertible", year=2021, price=Decimal("27650.00")),
    Vehicle(id="8", manufacturer="Toyota", model="RAV4", type="SUV", year=2021, price=Decimal("27575.00")),
    Vehicle(id="9", manufacturer="Honda", model="Civic", type="Sedan", year=2022, price=Decimal("22550.00")),
    Vehicle(id="10", manufacturer="Ford", model="Mustang", type="Coupe", year=2023, price=Decimal("30920.00")),
    Vehicle(id="11", manufacturer="Audi", model="A4", type="Sedan", year=2021, price=Decimal("39900.00")),
    Vehicle(id="12", manufacturer="Jeep", model="Wrangler", type="SUV", year=2022, price=Decimal("31895.00")),
)
