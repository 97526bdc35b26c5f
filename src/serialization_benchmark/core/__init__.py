"""Harness core: data model, verification gate, timing and the runner."""

from . import models
from .models import BenchmarkResults, GenerationSeed, LatencyDistribution, Operation
from .profiling import CProfileProfiler, NullProfiler, Profiler
from .runner import BenchmarkRunner
from .timing import StableTimer, TimingEngine
from .verification import VerificationMismatch, assert_round_trip, verify

__all__ = [
	"models",
	"BenchmarkResults",
	"BenchmarkRunner",
	"CProfileProfiler",
	"GenerationSeed",
	"LatencyDistribution",
	"NullProfiler",
	"Operation",
	"Profiler",
	"StableTimer",
	"TimingEngine",
	"VerificationMismatch",
	"assert_round_trip",
	"verify",
]
