from .csv_exporter import export_csv, records_to_dataframe
from .json_exporter import export_json

__all__ = ["export_csv", "export_json", "records_to_dataframe"]
