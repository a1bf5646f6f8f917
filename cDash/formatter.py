from typing import List

from rich.text import Text

from cDash.models import ContainerRecord

header_map = {
    "id": "ID",
    "image": "Image",
    "command": "Command",
    "status": "Status",
    "names": "Names",
}

# Relative column widths for the container table
column_ratios = {
    "id": 2,
    "image": 3,
    "command": 4,
    "status": 3,
    "names": 3,
}

SHA_256_ID_PICK_SIZE = 12


class RichFormatter:

    def get_header_row(self) -> List[str]:
        return list(header_map.values())

    def get_column_ratios(self) -> List[int]:
        return [column_ratios[k] for k in header_map]

    def get_container_row(self, record: ContainerRecord) -> List[Text]:
        values = {
            "id": record.id[:SHA_256_ID_PICK_SIZE],
            "image": record.image,
            "command": record.command.strip('"'),
            "status": record.status,
            "names": record.names,
        }
        return [Text(values[attr], overflow="ellipsis", no_wrap=True) for attr in header_map]
