from textinsight.analyzers.base import BaseAnalyzer
from textinsight.analyzers.factory import AnalyzerFactory
from textinsight.analyzers.models import AnalysisStatus, AnalysisType, ModelRef

__all__ = ["AnalysisStatus", "AnalysisType", "AnalyzerFactory", "BaseAnalyzer", "ModelRef"]
