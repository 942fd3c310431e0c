from absl.testing import absltest
from payload.adapter import ConditionChangeAdapter, IMessageAdapter
from ward.conditions import Conditions


class TestConditionChangeAdapter(absltest.TestCase):

    def setUp(self):
        self.adapter = ConditionChangeAdapter()

    def test_formats_condition(self):
        self.assertEqual(
            self.adapter.to_text(Conditions.CRITICAL),
            "The patient's condition changed to: Critical")

    def test_condition_inserted_verbatim(self):
        self.assertEqual(
            self.adapter.to_text(" fair "),
            "The patient's condition changed to:  fair ")
        self.assertEqual(self.adapter.to_text(""), "The patient's condition changed to: ")

    def test_interface_is_abstract(self):
        with self.assertRaises(TypeError):
            IMessageAdapter()


class TestConditions(absltest.TestCase):

    def test_all_conditions(self):
        self.assertEqual(Conditions.all(), ("Good", "Fair", "Serious", "Critical", "Stable"))


if __name__ == "__main__":
    absltest.main()
