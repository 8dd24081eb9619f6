"""Vehicle configuration — product line, price override, and registration details."""

from pydantic import BaseModel, ConfigDict, Field

from vehicle_tco.config.options import Application, PlateColor, ProductType, RegistrationType


class VehicleConfig(BaseModel):
    """The vehicle being priced.

    Only ``product_type`` and ``vehicle_price`` feed the formulas.
    Registration, plate colour and application are carried through to the
    report as informational fields.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    product_type: ProductType = Field(default="elf", description="Product line: elf, traga or giga")
    vehicle_price: float | None = Field(
        default=None, ge=0,
        description="Custom vehicle price (Rp). None = use the product's base price.",
    )
    registration: RegistrationType = Field(default="on-road", description="On-road or off-road registration")
    plate_color: PlateColor = Field(default="yellow", description="Yellow (commercial) or white (private) plate")
    application: Application = Field(default="pickup", description="Body / application type")
