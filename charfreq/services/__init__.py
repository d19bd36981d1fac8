"""
Package charfreq.services - FrequencyEngine va cac dependency injectable.

Modules:
- frequency_engine: FrequencyEngine (orchestrator)
- cpu_probe: PsutilCpuProbe, FixedCpuProbe
- engine_registry: Engine singleton cho public API
- interfaces: IFrequencyEngine, ICpuProbe
"""
