"""
Tests for the error taxonomy and the API exception handler.
"""
import pytest
from rest_framework import exceptions as drf_exceptions
from rest_framework import status

from modules.categories.exceptions import (
    CategoryCycleError,
    CategoryPathIntegrityError,
    DuplicateReorderIdsError,
    ParentCategoryNotFoundError,
    SlugConflictError,
)
from shared.exceptions import (
    AppException,
    ConflictError,
    ErrorKind,
    NotFoundError,
    ValidationError,
    custom_exception_handler,
)


def _handle(exc):
    return custom_exception_handler(exc, {})


class TestErrorKinds:

    @pytest.mark.parametrize('exc, kind', [
        (ParentCategoryNotFoundError(1), ErrorKind.NOT_FOUND),
        (CategoryCycleError(1, 2), ErrorKind.CONFLICT),
        (SlugConflictError('laptops'), ErrorKind.CONFLICT),
        (DuplicateReorderIdsError(), ErrorKind.VALIDATION),
        (CategoryPathIntegrityError(3), ErrorKind.INTERNAL),
    ])
    def test_category_errors_carry_kind(self, exc, kind):
        assert exc.kind == kind
        assert isinstance(exc, AppException)

    def test_default_code_is_class_name(self):
        assert AppException('boom').code == 'AppException'


class TestCustomExceptionHandler:

    @pytest.mark.parametrize('exc, expected_status', [
        (ValidationError('bad input'), status.HTTP_400_BAD_REQUEST),
        (ConflictError('rule broken'), status.HTTP_409_CONFLICT),
        (NotFoundError('Thing', 1), status.HTTP_404_NOT_FOUND),
        (CategoryPathIntegrityError(5), status.HTTP_500_INTERNAL_SERVER_ERROR),
    ])
    def test_status_follows_kind(self, exc, expected_status):
        assert _handle(exc).status_code == expected_status

    def test_not_found_body(self):
        response = _handle(NotFoundError('Thing', 7))

        assert response.data == {
            'error': "Thing with id '7' not found",
            'code': 'ENTITY_NOT_FOUND',
            'kind': 'not_found',
            'entity': 'Thing',
            'entity_id': 7,
        }

    def test_conflict_body_names_rule(self):
        response = _handle(CategoryCycleError(1, 2))

        assert response.data['code'] == 'CATEGORY_CYCLE'
        assert response.data['kind'] == 'conflict'
        assert response.data['rule'] == 'acyclic_hierarchy'

    def test_internal_error_is_logged(self, caplog):
        with caplog.at_level('ERROR', logger='shared.exceptions'):
            response = _handle(CategoryPathIntegrityError(5))

        assert response.data['code'] == 'DANGLING_PARENT'
        assert 'DANGLING_PARENT' in caplog.text

    def test_drf_validation_error(self):
        exc = drf_exceptions.ValidationError({'name': ['This field is required.']})

        response = _handle(exc)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['status'] == 400
        assert response.data['message'] == 'This field is required.'
        assert 'name' in response.data['errors']

    def test_drf_validation_error_list(self):
        response = _handle(drf_exceptions.ValidationError(['Something is off']))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Something is off'

    def test_drf_detail_error(self):
        response = _handle(drf_exceptions.NotFound())

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['status'] == 404
        assert 'message' in response.data

    def test_unknown_exception_is_not_handled(self):
        assert _handle(RuntimeError('boom')) is None
