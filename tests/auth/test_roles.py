"""
Tests for role resolution.
"""
from vetclinic.auth.models import RoleName
from vetclinic.auth.roles import assign_role, has_role, primary_role, roles_of


def test_registered_client_has_cliente_role(db, client_user):
    assert roles_of(db, client_user.id) == {RoleName.CLIENTE}


def test_admin_role_is_visible_immediately_after_assignment(db, client_user):
    assert has_role(db, client_user.id, RoleName.ADMIN) is False

    assign_role(db, client_user.id, RoleName.ADMIN)
    db.commit()

    assert has_role(db, client_user.id, RoleName.ADMIN) is True
    assert roles_of(db, client_user.id) == {RoleName.ADMIN, RoleName.CLIENTE}


def test_assigning_twice_is_a_no_op(db, client_user):
    assert assign_role(db, client_user.id, RoleName.CLIENTE) is False
    db.commit()
    assert roles_of(db, client_user.id) == {RoleName.CLIENTE}


def test_roles_are_not_a_fixed_set(db, client_user):
    assign_role(db, client_user.id, "RECEPCION")
    db.commit()
    assert has_role(db, client_user.id, "RECEPCION")


def test_unknown_user_has_no_roles(db):
    assert roles_of(db, 9999) == set()


def test_primary_role():
    assert primary_role({RoleName.CLIENTE, RoleName.ADMIN}) == RoleName.ADMIN
    assert primary_role({RoleName.CLIENTE}) == RoleName.CLIENTE
    assert primary_role(set()) == RoleName.CLIENTE
    assert primary_role({"RECEPCION"}) == "RECEPCION"
