"""
Unit tests for the report data service.
"""
from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError, NoResultFound

from services.report_service import ReportService, create_report, update_report, save_evidence
from tests.conftest import TEST_USER_ID


def _report_data(main_category_id, **overrides):
    data = {
        'title': 'Broken window',
        'description': 'Window smashed overnight.',
        'incident_date': '2026-10-02',
        'incident_time': '02:15',
        'location': 'Building B',
        'main_category_id': main_category_id,
        'user_id': TEST_USER_ID,
    }
    data.update(overrides)
    return data


class TestCreateAndUpdate:

    def test_create_report_returns_stored_row(self, db_session, models, categories):
        report = create_report(_report_data(categories['theft']))

        assert report.id
        stored = db_session.get(models['Report'], report.id)
        assert stored.title == 'Broken window'
        assert stored.incident_date == date(2026, 10, 2)
        assert stored.status == models['ReportStatus'].PENDING
        assert stored.category_name == 'Theft'

    def test_create_report_propagates_database_error(self, db_session, models, categories):
        data = _report_data(categories['theft'])
        del data['title']

        with pytest.raises(IntegrityError):
            create_report(data)
        assert models['Report'].query.count() == 0

    def test_update_report_by_id(self, db_session, sample_report):
        updated = update_report(sample_report.id, {'title': 'Bike recovered', 'status': 'resolved'})

        assert updated.id == sample_report.id
        assert updated.title == 'Bike recovered'
        assert updated.status == 'resolved'

    def test_update_unknown_report_raises(self, db_session):
        with pytest.raises(NoResultFound):
            update_report('missing-id', {'title': 'x'})


class TestEvidenceAndAssignments:

    def test_save_evidence_bulk_inserts_known_fields(self, db_session, models, sample_report):
        save_evidence([
            {
                'report_id': sample_report.id,
                'file_url': 'http://localhost/storage/evidence/x/a.png',
                'file_type': 'image/png',
                'uploaded_by': TEST_USER_ID,
                'file_name': 'ignored',
            },
            {
                'report_id': sample_report.id,
                'file_url': 'http://localhost/storage/evidence/x/b.pdf',
                'file_type': 'application/pdf',
                'description': 'Receipt',
                'uploaded_by': TEST_USER_ID,
            },
        ])

        rows = models['Evidence'].query.order_by(models['Evidence'].id).all()
        assert [row.file_type for row in rows] == ['image/png', 'application/pdf']
        assert rows[1].description == 'Receipt'
        assert rows[0].file_name == 'a.png'

    def test_insert_category_assignments(self, db_session, models, categories):
        report = create_report(_report_data(categories['theft']))

        ReportService.insert_category_assignments([
            {'report_id': report.id, 'subcategory_id': categories['burglary'],
             'main_category_id': categories['theft'], 'is_primary': False},
            {'report_id': report.id, 'subcategory_id': categories['pickpocketing'],
             'main_category_id': categories['theft'], 'is_primary': False},
        ])

        assignments = models['CategoryAssignment'].query.filter_by(report_id=report.id).all()
        assert sorted(a.subcategory_id for a in assignments) == sorted(
            [categories['burglary'], categories['pickpocketing']]
        )
        assert not any(a.is_primary for a in assignments)


class TestUpdateWithCategories:

    def test_replaces_assignments_wholesale(self, db_session, models, categories, sample_report):
        report_id = sample_report.id

        ReportService.update_report_with_categories(
            report_id,
            _report_data(categories['harassment'], title='Online abuse'),
            [{'subcategory_id': categories['online'], 'main_category_id': categories['harassment'],
              'is_primary': False}],
        )

        report = ReportService.fetch_report_with_assignments(report_id)
        assert report.title == 'Online abuse'
        assert report.main_category_id == categories['harassment']
        assert report.subcategory_ids() == [categories['online']]
        assert models['CategoryAssignment'].query.count() == 1

    def test_empty_category_list_clears_assignments(self, db_session, models, categories, sample_report):
        ReportService.update_report_with_categories(
            sample_report.id, _report_data(categories['theft']), []
        )

        assert models['CategoryAssignment'].query.count() == 0

    def test_failure_leaves_report_and_assignments_untouched(self, db_session, models, categories,
                                                            sample_report):
        report_id = sample_report.id

        with pytest.raises(KeyError):
            ReportService.update_report_with_categories(
                report_id,
                _report_data(categories['theft'], title='Should not persist'),
                [{'main_category_id': categories['theft']}],
            )

        report = ReportService.fetch_report_with_assignments(report_id)
        assert report.title == 'Bike stolen'
        assert len(report.category_assignments) == 2

    def test_unknown_report_raises(self, db_session, categories):
        with pytest.raises(NoResultFound):
            ReportService.update_report_with_categories(
                'missing-id', _report_data(categories['theft']), []
            )


class TestQueries:

    def test_fetch_report_with_assignments(self, db_session, categories, sample_report):
        report = ReportService.fetch_report_with_assignments(sample_report.id)

        assert sorted(report.subcategory_ids()) == sorted([categories['burglary'], categories['vehicle']])

    def test_fetch_unknown_report_raises(self, db_session):
        with pytest.raises(NoResultFound):
            ReportService.fetch_report_with_assignments('missing-id')

    def test_list_reports_for_user_only_returns_own_reports(self, db_session, categories, sample_report):
        create_report(_report_data(categories['theft'], user_id='someone-else'))

        reports = ReportService.list_reports_for_user(TEST_USER_ID)

        assert [r.id for r in reports] == [sample_report.id]

    def test_category_choices(self, db_session, categories):
        assert [c.name for c in ReportService.list_main_categories()] == ['Harassment', 'Theft']
        assert len(ReportService.list_subcategories()) == 4
