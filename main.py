# main.py
from line_offset.app.offset import line_offset
from line_offset.io.offset_logging import OffsetLogging


def run():
    line = {
        "type": "Feature",
        "properties": {"stroke": "#F00"},
        "geometry": {
            "type": "LineString",
            "coordinates": [[-83, 30], [-84, 36], [-78, 41]],
        },
    }

    hooks = OffsetLogging(run_id="demo", level="DEBUG", debug=True)
    offset = line_offset(line, 2, "miles", hooks=hooks)

    # draw the copy in blue next to the original
    offset["properties"] = {**offset["properties"], "stroke": "#00F"}
    return [offset, line]


if __name__ == "__main__":
    for feature in run():
        print(feature)
