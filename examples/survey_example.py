"""
Example of measuring property walls from DMS corner coordinates.
"""

from propsurvey import (
    EllipsoidalCalculator,
    MeasurementSession,
    format_dms,
    parse_dms,
)
from propsurvey.log import setup_logging
from propsurvey.report import render_session

CORNERS = [
    "28°52'43.1\"N 77°07'34.0\"E",
    "28°52'44.0\"N 77°07'35.2\"E",
    "28°52'42.6\"N 77°07'36.1\"E",
    "28°52'41.9\"N 77°07'34.6\"E",
]


def main():
    print("=" * 80)
    print("Property Survey - Basic Example")
    print("=" * 80)

    setup_logging("INFO")

    # Walk the boundary: each new corner is auto-armed with the previous one
    session = MeasurementSession()
    for text in CORNERS:
        point = parse_dms(text)
        marker = session.add_marker(point)
        print(f"{marker.label}: {format_dms(marker.position)}")
        if session.preview is not None:
            session.measure()

    # Close the loop from the last corner back to the first
    first, last = session.markers[0], session.markers[-1]
    session.toggle_select(last.id)
    session.toggle_select(first.id)
    session.measure()

    print()
    render_session(session)

    # Same boundary on the WGS84 ellipsoid
    print("\n" + "-" * 80)
    print("Ellipsoidal check (WGS84)...")
    ellipsoid = EllipsoidalCalculator()
    for line in session.lines:
        distance = ellipsoid.distance(line.start, line.end)
        print(f"{line.label}: sphere {line.distance_m:.2f} m, ellipsoid {distance:.2f} m")

    print("\n" + "=" * 80)
    print("Example completed!")
    print("=" * 80)


if __name__ == "__main__":
    main()
