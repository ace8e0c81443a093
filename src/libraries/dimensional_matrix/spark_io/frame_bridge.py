"""
Moves matrix contents to and from Spark DataFrames.
"""

from typing import Any, List, Optional, Tuple
from pyspark.sql import DataFrame, SparkSession
from pyspark.sql.types import (
    BooleanType,
    DataType,
    DoubleType,
    LongType,
    StringType,
    StructField,
    StructType
)
import logging
import time

from ..common.config import FrameConfig
from ..common.exceptions import ConfigurationError, DimensionalMatrixError, FrameBridgeError
from ..common.utils import validate_dataframe_columns, validate_key_tuple
from ..matrix.multidimensional_matrix import MultidimensionalMatrix

logger = logging.getLogger(__name__)


class MatrixFrameBridge:
    """Exports a matrix as a fact-style DataFrame and loads one back."""
    
    def __init__(self, config: FrameConfig, spark: SparkSession):
        """
        Initialize MatrixFrameBridge with configuration and Spark session.
        
        Args:
            config: Frame configuration
            spark: Spark session
        """
        self.config = config
        self.spark = spark
        
        logger.info(f"Initialized MatrixFrameBridge for columns: {config.all_columns}")
    
    def to_dataframe(self, matrix: MultidimensionalMatrix) -> DataFrame:
        """
        Export matrix combinations as a DataFrame.
        
        One column per dimension followed by the value column, in row-major
        combination order. Combinations without a value are left out unless
        include_absent is set.

        Column types are derived from the exported values: booleans, integers
        and floats keep their type, an int/float mix becomes double, and any
        other column (text, mixed types or no values at all) is written as a
        nullable string.

        Args:
            matrix: Matrix to export
            
        Returns:
            DataFrame with the configured columns
        """
        self._check_dimensions(matrix)
        start_time = time.time()
        
        try:
            rows = self._collect_rows(matrix)
            
            schema, rows = self._build_schema(rows)
            result_df = self.spark.createDataFrame(rows, schema)
            
            processing_time = time.time() - start_time
            logger.info(f"Exported {len(rows)} matrix rows in {processing_time:.2f} seconds")
            return result_df
            
        except Exception as e:
            logger.error(f"Matrix export failed: {str(e)}")
            raise FrameBridgeError(f"Matrix export failed: {str(e)}", "export")
    
    def load_dataframe(self, df: DataFrame,
                       matrix: Optional[MultidimensionalMatrix] = None) -> MultidimensionalMatrix:
        """
        Load DataFrame rows into a matrix.
        
        Rows with a null dimension key are skipped. A null value removes the
        entry, like set_value with None. All rows are validated before the
        first one is stored, so a row with an unusable key leaves the matrix
        unchanged.

        Args:
            df: Input DataFrame holding the configured columns
            matrix: Matrix to fill; a new one is created when omitted
            
        Returns:
            The filled matrix
        """
        if matrix is None:
            matrix = MultidimensionalMatrix(len(self.config.dimension_columns),
                                            self.config.comparator,
                                            self.config.dimension_columns)
        else:
            self._check_dimensions(matrix)
        
        missing_columns = validate_dataframe_columns(df.columns, self.config.all_columns)
        if missing_columns:
            raise FrameBridgeError(f"Columns not found in DataFrame: {missing_columns}", "load")
        
        try:
            rows = df.select(*self.config.all_columns).collect()
            
            entries = []
            skipped_count = 0
            for row in rows:
                keys = tuple(row[c] for c in self.config.dimension_columns)
                if any(key is None for key in keys):
                    skipped_count += 1
                    continue
                entries.append((validate_key_tuple(keys, matrix.dimension_count),
                                row[self.config.value_column]))

            for keys, value in entries:
                matrix.set_value(value, *keys)

            if skipped_count > 0:
                logger.warning(f"Skipped {skipped_count} rows with null dimension keys")
            logger.info(f"Loaded {len(entries)} rows into matrix")
            return matrix
            
        except DimensionalMatrixError:
            raise
        except Exception as e:
            logger.error(f"Matrix load failed: {str(e)}")
            raise FrameBridgeError(f"Matrix load failed: {str(e)}", "load")
    
    def _collect_rows(self, matrix: MultidimensionalMatrix) -> List[Tuple[Any, ...]]:
        rows = []
        for entry in matrix.get_combinations():
            if entry.value is None and not self.config.include_absent:
                continue
            rows.append(entry.keys + (entry.value,))
        return rows
    
    def _check_dimensions(self, matrix: MultidimensionalMatrix) -> None:
        if matrix.dimension_count != len(self.config.dimension_columns):
            raise ConfigurationError(
                f"dimension_columns length = {len(self.config.dimension_columns)} must be equals "
                f"matrix dimension count = {matrix.dimension_count}",
                "dimension_columns"
            )
    
    def _build_schema(self, rows: List[Tuple[Any, ...]]) -> Tuple[StructType, List[Tuple[Any, ...]]]:
        """
        Build an explicit schema for the exported rows.
        
        Args:
            rows: Row tuples in all_columns order
            
        Returns:
            The schema and the rows with values converted to the column types
        """
        columns = [list(column) for column in zip(*rows)] or [[] for _ in self.config.all_columns]
        fields = []
        for name, values in zip(self.config.all_columns, columns):
            data_type = _infer_column_type(values)
            if isinstance(data_type, DoubleType):
                values[:] = [float(v) if v is not None else None for v in values]
            elif isinstance(data_type, StringType):
                values[:] = [str(v) if v is not None else None for v in values]
            fields.append(StructField(name, data_type, True))
        
        return StructType(fields), [tuple(row) for row in zip(*columns)]


def _infer_column_type(values: List[Any]) -> DataType:
    kinds = {type(v) for v in values if v is not None}
    if kinds == {bool}:
        return BooleanType()
    if kinds == {int}:
        return LongType()
    if kinds and kinds <= {int, float}:
        return DoubleType()
    return StringType()
