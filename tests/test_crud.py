from salao.services.crud import payment_method_editor, specialty_editor


def test_seeded_specialties_and_payment_methods(container):
    names = [s.name for s in container.specialties.get_all()]
    assert names == ["Barbeiro", "Manicure", "Cabelereira", "Podóloga", "Quiropraxia", "Esteticista"]
    assert container.specialties.get_by_id("spec-podologa").active is False
    assert [m.name for m in container.payment_methods.get_active()] == [
        "Dinheiro",
        "Pix",
        "Cartão de Crédito",
        "Cartão de Débito",
    ]


def test_open_new_uses_default_draft():
    editor = specialty_editor()
    editor.open()
    assert editor.is_editing
    assert editor.draft == {"name": "", "active": True}


def test_submit_new_record_appends_with_generated_id(container):
    editor = specialty_editor()
    before = container.specialties.count()

    editor.open()
    editor.update_draft(name="  Massagista ")
    result = editor.submit()

    assert result.success
    assert result.message == "Especialidade salva com sucesso."
    assert container.specialties.count() == before + 1
    assert result.record.id
    assert result.record.name == "Massagista"
    assert not editor.is_editing


def test_submit_existing_record_replaces_in_place(container):
    editor = specialty_editor()
    before = container.specialties.count()

    editor.open(container.specialties.get_by_id("spec-barbeiro"))
    editor.update_draft(name="Barbeiro Sênior")
    result = editor.submit()

    assert result.success
    assert container.specialties.count() == before
    assert container.specialties.get_by_id("spec-barbeiro").name == "Barbeiro Sênior"
    assert container.specialties.get_all()[0].id == "spec-barbeiro"


def test_submit_with_blank_name_stays_in_editing(container):
    editor = payment_method_editor()
    before = container.payment_methods.count()

    editor.open()
    editor.update_draft(name="   ")
    result = editor.submit()

    assert not result.success
    assert result.message.startswith("name")
    assert editor.is_editing
    assert container.payment_methods.count() == before


def test_close_discards_draft(container):
    editor = payment_method_editor()
    editor.open(container.payment_methods.get_by_id("pm-pix"))
    editor.update_draft(name="PIX!")
    editor.close()

    assert not editor.is_editing
    assert editor.draft == {}
    assert container.payment_methods.get_by_id("pm-pix").name == "Pix"


def test_delete_asks_for_confirmation(container, always_yes):
    editor = payment_method_editor()
    prompts = []

    def confirm(title, message):
        prompts.append((title, message))
        return False

    declined = editor.delete("pm-pix", confirm)
    assert not declined.success
    assert container.payment_methods.get_by_id("pm-pix") is not None
    assert prompts == [
        ("Excluir Forma de Pagamento", "Tem certeza que deseja excluir esta forma de pagamento?")
    ]

    accepted = editor.delete("pm-pix", always_yes)
    assert accepted.success
    assert accepted.message == "Forma de pagamento excluída com sucesso."
    assert container.payment_methods.get_by_id("pm-pix") is None


def test_toggle_status_sets_active_flag(container):
    editor = specialty_editor()
    assert editor.toggle_status("spec-podologa", True)
    assert container.specialties.get_by_id("spec-podologa").active is True
    assert editor.toggle_status("missing", False) is False
