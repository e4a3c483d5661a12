"""
Hwmon discovery: InputReading (one *_input file), MonitoringGroup (one hwmon
directory) and Registry (every group under the monitoring root).
"""
