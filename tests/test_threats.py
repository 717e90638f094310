import unittest

from netpulse.analysis.threats import ThreatEngine
from netpulse.models.alert import AlertKind
from netpulse.models.packet import ThreatLevel

from helpers import make_event


class ThreatEngineTests(unittest.TestCase):
    def setUp(self):
        self.engine = ThreatEngine()

    def test_empty_view_has_no_alerts(self):
        self.assertEqual(self.engine.analyze([]), ())

    def test_single_source_flood_is_ddos_not_port_scan(self):
        view = [make_event(i, source_addr="10.9.9.9", dest_port=80) for i in range(1, 61)]
        alerts = self.engine.analyze(view)

        self.assertEqual(len(alerts), 1)
        alert = alerts[0]
        self.assertEqual(alert.kind, AlertKind.POTENTIAL_DDOS)
        self.assertEqual(alert.severity, ThreatLevel.HIGH)
        self.assertEqual(alert.occurrence_count, 60)
        self.assertEqual(alert.alert_id, "ddos_10.9.9.9")
        self.assertEqual(alert.observed_at_us, view[-1].timestamp_us)

    def test_ddos_threshold_is_strict(self):
        view = [make_event(i, source_addr="10.9.9.9") for i in range(1, 51)]
        self.assertEqual(self.engine.analyze(view), ())

    def test_distinct_ports_trigger_port_scan(self):
        view = [make_event(i, source_addr="172.16.0.4", dest_port=1000 + i) for i in range(1, 16)]
        alerts = self.engine.analyze(view)

        self.assertEqual(len(alerts), 1)
        self.assertEqual(alerts[0].kind, AlertKind.PORT_SCANNING)
        self.assertEqual(alerts[0].severity, ThreatLevel.MEDIUM)
        self.assertEqual(alerts[0].occurrence_count, 15)

    def test_port_scan_threshold_is_strict(self):
        view = [make_event(i, dest_port=1000 + i) for i in range(1, 11)]
        self.assertEqual(self.engine.analyze(view), ())

    def test_per_event_classification(self):
        view = [
            make_event(1, threat_level=ThreatLevel.LOW),
            make_event(2, threat_level=ThreatLevel.HIGH),
            make_event(3, threat_level=ThreatLevel.MEDIUM),
            make_event(4, threat_level=ThreatLevel.CRITICAL),
        ]
        alerts = self.engine.analyze(view)

        self.assertEqual([a.alert_id for a in alerts], ["threat_4", "threat_2"])
        self.assertEqual(alerts[0].kind, AlertKind.MALICIOUS_ACTIVITY)
        self.assertEqual(alerts[1].kind, AlertKind.SUSPICIOUS_BEHAVIOR)
        self.assertTrue(all(a.occurrence_count == 1 for a in alerts))
        self.assertEqual(alerts[1].observed_at_us, view[1].timestamp_us)
        self.assertIn("shows high risk patterns", alerts[1].description)

    def test_ordering_by_severity_then_rule_order(self):
        # source A floods one port, source B scans ports, plus high and critical events
        view = [make_event(i, source_addr="A", dest_port=80) for i in range(1, 52)]
        view += [make_event(100 + i, source_addr="B", dest_port=2000 + i) for i in range(11)]
        view.append(make_event(200, source_addr="C", threat_level=ThreatLevel.HIGH))
        view.append(make_event(201, source_addr="D", threat_level=ThreatLevel.CRITICAL))
        view.append(make_event(202, source_addr="E", threat_level=ThreatLevel.HIGH))

        alerts = self.engine.analyze(view)

        self.assertEqual(
            [a.alert_id for a in alerts],
            ["threat_201", "threat_200", "threat_202", "ddos_A", "portscan_B"],
        )

    def test_sources_reported_in_first_seen_order(self):
        view = [make_event(i, source_addr="zulu", dest_port=80) for i in range(1, 52)]
        view += [make_event(100 + i, source_addr="alpha", dest_port=80) for i in range(51)]
        alerts = self.engine.analyze(view)
        self.assertEqual([a.source_addr for a in alerts], ["zulu", "alpha"])

    def test_custom_thresholds(self):
        engine = ThreatEngine(ddos_threshold=2, port_scan_threshold=1)
        view = [make_event(i, source_addr="x", dest_port=i) for i in range(1, 4)]
        kinds = [a.kind for a in engine.analyze(view)]
        self.assertEqual(kinds, [AlertKind.POTENTIAL_DDOS, AlertKind.PORT_SCANNING])

    def test_analysis_is_recomputed_each_call(self):
        view = [make_event(1, threat_level=ThreatLevel.HIGH)]
        self.assertEqual(len(self.engine.analyze(view)), 1)
        self.assertEqual(self.engine.analyze([]), ())
        self.assertEqual(self.engine.analyze(view), self.engine.analyze(list(view)))


if __name__ == "__main__":
    unittest.main()
