"""DynamoDB storage for scrape reports."""
import json
import logging
from typing import Optional

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError

from processor.errors import StorageError
from processor.models import ScrapeRun
from storage.report_sink import ReportSink

logger = logging.getLogger(__name__)


class DynamoDBReportSink(ReportSink):
    """
    Stores each scrape run as one DynamoDB item.

    Items are keyed by a constant partition (``report_type``) and sorted by
    ``run_id``, so the latest run is a single descending query. The report
    document itself is stored whole as a JSON string.
    """

    REPORT_TYPE = 'scrape-run'

    def __init__(self, table_name: str):
        """
        Initialize DynamoDB client and table reference.

        Args:
            table_name: Name of the DynamoDB table

        Raises:
            StorageError: If the DynamoDB client cannot be created
        """
        self.table_name = table_name
        try:
            self.dynamodb = boto3.resource('dynamodb')
            self.table = self.dynamodb.Table(table_name)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error initializing DynamoDB for table {table_name}: {e}")
            raise StorageError(f"Failed to connect to DynamoDB: {e}") from e
        logger.info(f"Initialized DynamoDBReportSink for table: {table_name}")

    def persist(self, scrape_run: ScrapeRun) -> None:
        item = {
            'report_type': self.REPORT_TYPE,
            'run_id': scrape_run.run_id,
            'completed_at': scrape_run.completed_at,
            'total_events': scrape_run.total_events,
            'total_errors': scrape_run.total_errors,
            'report': json.dumps(scrape_run.to_dict(), ensure_ascii=False),
        }

        try:
            self.table.put_item(Item=item)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error writing scrape run {scrape_run.run_id}: {e}")
            raise StorageError(f"Failed to write scrape run: {e}") from e

        logger.info(f"Scrape run {scrape_run.run_id} saved to table {self.table_name}")

    def get_latest(self) -> Optional[dict]:
        """
        Retrieve the most recent scrape report.

        Returns:
            The report document, or None if no run has been stored

        Raises:
            StorageError: If the table cannot be queried or the item is malformed
        """
        try:
            response = self.table.query(
                KeyConditionExpression=Key('report_type').eq(self.REPORT_TYPE),
                ScanIndexForward=False,
                Limit=1
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error querying table {self.table_name}: {e}")
            raise StorageError(f"Failed to read scrape runs: {e}") from e

        items = response.get('Items', [])
        if not items:
            return None

        try:
            return json.loads(items[0]['report'])
        except (KeyError, ValueError) as e:
            raise StorageError(f"Malformed scrape run item: {e}") from e
