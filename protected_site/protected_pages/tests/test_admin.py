from django.contrib.auth.hashers import check_password
from django.test import TestCase

from protected_pages.admin import ProtectedPageForm
from protected_pages.models import ProtectedPage


class ProtectedPageFormTests(TestCase):

    def test_password_is_hashed(self):
        form = ProtectedPageForm(data={"path": "/vip", "raw_password": "page-secret"})
        self.assertTrue(form.is_valid(), form.errors)
        page = form.save()
        self.assertNotEqual(page.password, "page-secret")
        self.assertTrue(check_password("page-secret", page.password))

    def test_blank_keeps_existing(self):
        page = ProtectedPage(path="/vip")
        page.set_password("page-secret")
        page.save()
        old_hash = page.password

        form = ProtectedPageForm(data={"path": "/vip-renamed", "raw_password": ""}, instance=page)
        self.assertTrue(form.is_valid(), form.errors)
        page = form.save()
        self.assertEqual(page.path, "/vip-renamed")
        self.assertEqual(page.password, old_hash)

    def test_clear_password(self):
        page = ProtectedPage(path="/vip")
        page.set_password("page-secret")
        page.save()

        form = ProtectedPageForm(data={"path": "/vip", "clear_password": "on"}, instance=page)
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.save().password, "")
